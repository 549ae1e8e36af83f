"""
Contains the StringValidatorChain which adds validators for string values to the generic ValidatorChain.
"""
import re
from typing import Callable, Optional, Pattern

from .builder import ValidatorChain
from .utils import ensure_str

_ANY_LETTER = re.compile(r"[A-Za-z]")
_NON_DIGITS = re.compile(r"[^0-9]")


class StringValidatorChain(ValidatorChain[str]):
    """
    A validator chain for strings. All validators here expect a value which is not None; this holds because they
    run after the required check or are skipped by the optional chain.
    Every method accepts an optional `message` which replaces the message of the locale.
    """

    def _add_check(
        self, name: str, is_valid: Callable[[str], bool], error: Callable[[str], str], message: Optional[str]
    ) -> "StringValidatorChain":
        def validate(value: Optional[str]) -> Optional[str]:
            checked = ensure_str(value, name)
            if is_valid(checked):
                return None
            return message if message is not None else error(checked)

        return self.add(validate)

    def match(self, other_value: Optional[str], message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be equal to `other_value`, e.g. for a password confirmation"""
        locale = self.locale

        def validate(value: Optional[str]) -> Optional[str]:
            if value == other_value:
                return None
            return message if message is not None else locale.no_match()

        return self.add(validate)

    def min_length(self, min_length: int, message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be at least `min_length` characters long"""
        return self._add_check(
            "min_length",
            lambda value: len(value) >= min_length,
            lambda value: self.locale.min_length(value, min_length),
            message,
        )

    def max_length(self, max_length: int, message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be at most `max_length` characters long"""
        return self._add_check(
            "max_length",
            lambda value: len(value) <= max_length,
            lambda value: self.locale.max_length(value, max_length),
            message,
        )

    def reg_exp(self, pattern: str | Pattern[str], message: str) -> "StringValidatorChain":
        """
        The value must contain a match of `pattern`. Anchor the pattern to match the whole value.
        There is no locale message for this validator, so `message` is mandatory.
        """
        compiled = re.compile(pattern)
        return self._add_check("reg_exp", lambda value: compiled.search(value) is not None, lambda _: message, None)

    def email(self, message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be a well formatted email address"""
        pattern = self.options.email_regexp
        return self._add_check("email", lambda value: pattern.search(value) is not None, self.locale.email, message)

    def phone(self, message: Optional[str] = None) -> "StringValidatorChain":
        """
        The value must be a well formatted phone number. It must not contain any letters; all other non digit
        characters (spaces, brackets, dashes, a leading "+") are removed before the phone pattern is applied.
        """
        pattern = self.options.phone_regexp

        def is_phone_number(value: str) -> bool:
            # letters short circuit the full check
            if _ANY_LETTER.search(value):
                return False
            return pattern.search(_NON_DIGITS.sub("", value)) is not None

        return self._add_check("phone", is_phone_number, self.locale.phone_number, message)

    def ip(self, message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be a well formatted IPv4 address"""
        pattern = self.options.ipv4_regexp
        return self._add_check("ip", lambda value: pattern.search(value) is not None, self.locale.ip, message)

    def ipv6(self, message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be a well formatted IPv6 address"""
        pattern = self.options.ipv6_regexp
        return self._add_check("ipv6", lambda value: pattern.search(value) is not None, self.locale.ipv6, message)

    def url(self, message: Optional[str] = None) -> "StringValidatorChain":
        """The value must be a well formatted URL"""
        pattern = self.options.url_regexp
        return self._add_check("url", lambda value: pattern.search(value) is not None, self.locale.url, message)


# Aliases kept for callers of the former builder names
ValidationBuilder = StringValidatorChain
StringValidationBuilder = StringValidatorChain
