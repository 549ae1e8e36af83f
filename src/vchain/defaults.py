"""
Contains the process-wide defaults which are injected into every validator chain that is constructed without an
explicit locale or options bag.

The defaults are read when a chain is constructed; chains constructed earlier keep what they captured. Changing the
defaults is not synchronized: call `set_locale` / `set_options` once at startup, before chains get constructed
concurrently.
"""
import logging
import os
from typing import Optional

from .errors import UnknownLocaleError
from .locale import FormValidatorLocale, available_locales, create_locale
from .options import ValidatorOptions

_logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "VCHAIN_LOCALE"
FALLBACK_LOCALE_NAME = "default"


class Defaults:
    """
    Holds the default locale and the default options bag. There is one module level instance (`defaults`) which is
    used by the validator chains.
    """

    def __init__(self, locale: FormValidatorLocale, options: ValidatorOptions):
        self.locale: FormValidatorLocale = locale
        self.options: ValidatorOptions = options

    @classmethod
    def from_env(cls) -> "Defaults":
        """
        Creates the defaults using the locale named by the environment variable `VCHAIN_LOCALE`. If it is not set
        or names an unknown locale, the "default" locale is used.
        """
        locale_name = os.environ.get(LOCALE_ENV_VAR, FALLBACK_LOCALE_NAME)
        locale = create_locale(locale_name)
        if locale is None:
            _logger.warning(
                "%s=%r is not a known locale, falling back to '%s'", LOCALE_ENV_VAR, locale_name, FALLBACK_LOCALE_NAME
            )
            locale = create_locale(FALLBACK_LOCALE_NAME)
            assert locale is not None, "The fallback locale is always registered"
        return cls(locale=locale, options=ValidatorOptions())


defaults = Defaults.from_env()


def get_locale() -> FormValidatorLocale:
    """The locale used by chains constructed without an explicit locale"""
    return defaults.locale


def get_options() -> ValidatorOptions:
    """The options bag used by chains constructed without explicit options"""
    return defaults.options


def set_locale(locale_name: str) -> None:
    """
    Changes the default locale for all chains constructed afterwards. Raises an UnknownLocaleError if no locale is
    registered for `locale_name`.
    """
    locale = create_locale(locale_name)
    if locale is None:
        raise UnknownLocaleError(locale_name, available_locales())
    _logger.debug("Default locale changed to '%s'", locale.name)
    defaults.locale = locale


def set_options(options: Optional[ValidatorOptions]) -> None:
    """
    Changes the default options bag for all chains constructed afterwards. Passing None restores the built-in
    patterns.
    """
    defaults.options = options if options is not None else ValidatorOptions()
    _logger.debug("Default options changed")
