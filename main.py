from catalogue_scraper.engine import ScraperEngine
from catalogue_scraper.config import ScraperConfig
from catalogue_scraper.log import console, configure_logging
from catalogue_scraper.providers import get_provider_class, PROVIDER_REGISTRY
from catalogue_scraper.errors import (
    ScraperError,
    ValidationError,
    ProviderError,
)
from pathlib import Path
import argparse
import logging
import sys
import questionary

logger = logging.getLogger("catalogue_scraper")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape a university course catalogue into JSON and CSV")
    parser.add_argument("--provider", choices=sorted(PROVIDER_REGISTRY), help="Which catalogue to scrape, asked interactively if left out and more than one exists")
    parser.add_argument("--max-pages", type=int, help="Number of listing pages to walk (default 2)")
    parser.add_argument("--delay", type=float, help="Seconds to wait after every request (default 1)")
    parser.add_argument("--output-dir", type=Path, help="Where course_ids.json, course_details.json and course_details.csv go (default: current directory)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every request")
    return parser


def choose_provider(provider_key: str | None) -> str:
    if provider_key:
        return provider_key

    provider_keys = sorted(PROVIDER_REGISTRY)
    if not provider_keys:
        raise ProviderError("No providers are registered.")
    if len(provider_keys) == 1:
        return provider_keys[0]

    # Create mapping from display text to provider key
    display_to_key = {key.replace("_", " ").title(): key for key in provider_keys}
    selection = questionary.select(
        "Select a university",
        choices=list(display_to_key.keys()),
        use_search_filter=True,
        use_jk_keys=False,
    ).ask()
    # questionary returns None on Ctrl-C
    if selection is None:
        raise ProviderError("No university selected.")
    return display_to_key[selection]


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = ScraperConfig.build(
            max_pages=args.max_pages,
            request_delay=args.delay,
            output_dir=args.output_dir,
        )

        provider_key = choose_provider(args.provider)
        ProviderClass = get_provider_class(provider_key)
        if not ProviderClass:
            raise ProviderError(f"Provider {provider_key} not found.")

        engine = ScraperEngine(ProviderClass(config))
        engine.run()

    # Bad command line values, nothing was fetched yet
    except ValidationError as error:
        console.print(f"Validation error: {error}", style="bold red")
        return 1
    # Item level failures never get here, so this is something that stops the whole run
    except ScraperError as error:
        logger.error("An error occurred during the scraping process: %s", error)
        return 1
    # Most likely we couldn't write one of the output files
    except OSError as error:
        logger.error("An error occurred during the scraping process: %s", error)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
