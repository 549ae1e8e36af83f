"""
This package enables you to compose validators for single values, e.g. form fields. A chain runs its validators in
order and returns the message of the first failing one, or None if the value is valid.
"""

from .builder import GenericValidationBuilder, ValidatorChain
from .defaults import get_locale, get_options, set_locale, set_options
from .errors import LocaleResolutionError, UnknownLocaleError
from .locale import FormValidatorLocale, TemplateLocale, available_locales, create_locale, register_locale
from .options import ValidatorOptions
from .string_builder import StringValidationBuilder, StringValidatorChain, ValidationBuilder
from .types import StringValidationCallback, ValidationCallback
