"""
Contains the registry which maps locale names onto locale factories.
"""
import logging
from typing import Callable, Optional

from .base import FormValidatorLocale, TemplateLocale
from .languages import BUILTIN_MESSAGES

_logger = logging.getLogger(__name__)

LocaleFactory = Callable[[], FormValidatorLocale]

_registry: dict[str, LocaleFactory] = {}


def _normalize(locale_name: str) -> str:
    return locale_name.strip().lower().replace("-", "_")


def register_locale(locale_name: str, factory: LocaleFactory) -> None:
    """
    Registers a factory for `locale_name`. An already registered locale with the same name gets replaced.
    Like changing the global defaults this is meant to happen at startup.
    """
    key = _normalize(locale_name)
    if key in _registry:
        _logger.debug("Replacing the registered locale '%s'", key)
    _registry[key] = factory


def available_locales() -> list[str]:
    """Sorted list of all registered locale names"""
    return sorted(_registry.keys())


def create_locale(locale_name: str) -> Optional[FormValidatorLocale]:
    """
    Creates the locale registered for `locale_name`. The lookup is case-insensitive and falls back from a region
    specific name to the language, e.g. `de-AT` resolves to `de` if there is no `de_at` locale.
    Returns None if no locale matches.
    """
    key = _normalize(locale_name)
    factory = _registry.get(key)
    if factory is None and "_" in key:
        factory = _registry.get(key.split("_", 1)[0])
    if factory is None:
        _logger.debug("No locale registered for '%s'", locale_name)
        return None
    return factory()


def _template_factory(locale_name: str) -> LocaleFactory:
    messages = BUILTIN_MESSAGES[locale_name]
    return lambda: TemplateLocale(locale_name, messages)


for _name in BUILTIN_MESSAGES:
    register_locale(_name, _template_factory(_name))
