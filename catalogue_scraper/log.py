import logging

from rich.console import Console
from rich.logging import RichHandler

# Shared so progress bars and log lines don't draw over each other
console = Console()

def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # urllib3 is chatty at DEBUG and we already log every request ourselves
    logging.getLogger("urllib3").setLevel(logging.WARNING)
