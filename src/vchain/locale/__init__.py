"""
Contains the locales which provide the messages of failed validations.
"""
from .base import FormValidatorLocale, TemplateLocale
from .registry import LocaleFactory, available_locales, create_locale, register_locale
