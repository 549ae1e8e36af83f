"""
Contains the interface every locale has to implement and a locale implementation based on message templates.
"""
from string import Formatter
from typing import Protocol, runtime_checkable

from frozendict import frozendict

MESSAGE_KEYS = frozenset(
    {"required", "no_match", "min_length", "max_length", "email", "phone_number", "ip", "ipv6", "url"}
)
PLACEHOLDERS = frozenset({"value", "length"})


def _check_template(locale_name: str, key: str, template: str) -> None:
    """
    Raises a ValueError if `template` can not be formatted with the placeholders `{value}` and `{length}`.
    """
    try:
        field_names = [field_name for _, field_name, _, _ in Formatter().parse(template) if field_name is not None]
    except ValueError as error:
        raise ValueError(f"Locale '{locale_name}' has a malformed message '{key}': {error}") from error
    unsupported = set(field_names) - PLACEHOLDERS
    if unsupported:
        raise ValueError(
            f"Locale '{locale_name}' uses unsupported placeholder(s) {sorted(unsupported)} in message '{key}'"
        )
    # format specs may still be incompatible with the placeholder types, e.g. "{value:d}" or "{length:{width}}"
    try:
        template.format(value="", length=0)
    except (KeyError, IndexError, ValueError, TypeError, AttributeError) as error:
        raise ValueError(f"Locale '{locale_name}' has a malformed message '{key}': {error!r}") from error


@runtime_checkable
class FormValidatorLocale(Protocol):
    """
    A locale maps every error kind onto a display ready message. The messages may be parameterized by the
    offending value and the relevant bound.
    """

    @property
    def name(self) -> str:
        ...

    def required(self) -> str:
        ...

    def no_match(self) -> str:
        ...

    def min_length(self, value: str, length: int) -> str:
        ...

    def max_length(self, value: str, length: int) -> str:
        ...

    def email(self, value: str) -> str:
        ...

    def phone_number(self, value: str) -> str:
        ...

    def ip(self, value: str) -> str:
        ...

    def ipv6(self, value: str) -> str:
        ...

    def url(self, value: str) -> str:
        ...


class TemplateLocale:
    """
    A locale whose messages are `str.format` templates. The placeholders `{value}` and `{length}` are available.
    The message table is immutable; to change messages create a new locale with `derive`.
    """

    def __init__(self, name: str, messages: dict[str, str] | frozendict[str, str]):
        missing = MESSAGE_KEYS - set(messages.keys())
        if missing:
            raise ValueError(f"Locale '{name}' misses message(s) {sorted(missing)}")
        unknown = set(messages.keys()) - MESSAGE_KEYS
        if unknown:
            raise ValueError(f"Locale '{name}' has unknown message(s) {sorted(unknown)}")
        for key, template in messages.items():
            _check_template(name, key, template)
        self._name = name
        self.messages: frozendict[str, str] = messages if isinstance(messages, frozendict) else frozendict(messages)

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self):
        return f"TemplateLocale({self._name!r})"

    def __eq__(self, other):
        return isinstance(other, TemplateLocale) and self._name == other._name and self.messages == other.messages

    def __hash__(self):
        return hash(self._name) + hash(self.messages)

    def derive(self, name: str, **overrides: str) -> "TemplateLocale":
        """
        Returns a new locale based on this one but with some messages replaced.
        """
        return TemplateLocale(name, self.messages | overrides)

    def _format(self, key: str, value: str | None = None, length: int | None = None) -> str:
        return self.messages[key].format(value=value, length=length)

    def required(self) -> str:
        return self._format("required")

    def no_match(self) -> str:
        return self._format("no_match")

    def min_length(self, value: str, length: int) -> str:
        return self._format("min_length", value, length)

    def max_length(self, value: str, length: int) -> str:
        return self._format("max_length", value, length)

    def email(self, value: str) -> str:
        return self._format("email", value)

    def phone_number(self, value: str) -> str:
        return self._format("phone_number", value)

    def ip(self, value: str) -> str:
        return self._format("ip", value)

    def ipv6(self, value: str) -> str:
        return self._format("ipv6", value)

    def url(self, value: str) -> str:
        return self._format("url", value)
