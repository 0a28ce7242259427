"""
Registry of per-language default selector registries.
"""
import logging
from typing import Callable, Dict, List

from codedigest.core.engine.selectors import SelectorRegistry
from codedigest.models.enums import Language

logger = logging.getLogger(__name__)

RegistryFactory = Callable[[], SelectorRegistry]

_factories: Dict[Language, RegistryFactory] = {}


def language_selectors(language: Language):
    """Decorator registering a factory for ``language``'s default selectors."""
    def decorator(factory: RegistryFactory) -> RegistryFactory:
        if language in _factories:
            logger.warning(f"Default selectors for '{language.value}' already registered. Overwriting with {factory.__name__}.")
        _factories[language] = factory
        logger.debug(f'Registered default selectors: {factory.__name__} for {language.value}')
        return factory
    return decorator


def default_registry_for_language(language: Language) -> SelectorRegistry:
    """Build a fresh (unfrozen) default registry for ``language``."""
    factory = _factories.get(language)
    if factory is None:
        raise KeyError(f'No default selectors registered for {language.value}')
    return factory()


def get_supported_languages() -> List[Language]:
    return list(_factories.keys())
