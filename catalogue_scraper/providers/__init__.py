import pkgutil
import importlib
import inspect
import logging
from .base_provider import BaseProvider

logger = logging.getLogger(__name__)

# This dictionary will hold the map: 'university_of_southern_california' -> UniversityOfSouthernCaliforniaProvider class
PROVIDER_REGISTRY: dict[str, type[BaseProvider]] = {}

def _register_providers() -> None:
    """
    Scans this package (and the country sub-folders) for modules, imports them,
    and registers every concrete class that inherits from BaseProvider.
    """
    package_path = __path__
    prefix = __name__ + "."

    for _, name, _ in pkgutil.walk_packages(package_path, prefix):
        try:
            module = importlib.import_module(name)
        except ImportError as error:
            logger.warning("Could not load provider from %s: %s", name, error)
            continue

        for _, attribute_value in inspect.getmembers(module, inspect.isclass):
            if issubclass(attribute_value, BaseProvider) and not inspect.isabstract(attribute_value):
                PROVIDER_REGISTRY[attribute_value.university_name] = attribute_value

# As soon as we import the providers module, begin registering the providers
_register_providers()

def get_provider_class(uni_code: str) -> type[BaseProvider] | None:
    return PROVIDER_REGISTRY.get(uni_code)
