"""
Contains the options bag which exposes the precompiled patterns used by the string validators.
"""
import dataclasses
import re
from dataclasses import dataclass
from typing import Pattern

_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
_HEX = r"[0-9A-Fa-f]{1,4}"

EMAIL_REGEXP: Pattern[str] = re.compile(rf"^[A-Za-z0-9.!#$%&'*+/=?^_`{{|}}~-]+@{_LABEL}(?:\.{_LABEL})+$")
# applied to the value after all non digit characters have been stripped
PHONE_REGEXP: Pattern[str] = re.compile(r"^\d{7,15}$")
IPV4_REGEXP: Pattern[str] = re.compile(rf"^(?:{_OCTET}\.){{3}}{_OCTET}$")
IPV6_REGEXP: Pattern[str] = re.compile(
    rf"""^(?:
        (?:{_HEX}:){{7}}{_HEX}
        |(?:{_HEX}:){{1,7}}:
        |(?:{_HEX}:){{1,6}}:{_HEX}
        |(?:{_HEX}:){{1,5}}(?::{_HEX}){{1,2}}
        |(?:{_HEX}:){{1,4}}(?::{_HEX}){{1,3}}
        |(?:{_HEX}:){{1,3}}(?::{_HEX}){{1,4}}
        |(?:{_HEX}:){{1,2}}(?::{_HEX}){{1,5}}
        |{_HEX}:(?::{_HEX}){{1,6}}
        |:(?:(?::{_HEX}){{1,7}}|:)
        |(?:{_HEX}:){{6}}(?:{_OCTET}\.){{3}}{_OCTET}
        |::(?:ffff(?::0{{1,4}})?:)?(?:{_OCTET}\.){{3}}{_OCTET}
    )$""",
    re.VERBOSE,
)
URL_REGEXP: Pattern[str] = re.compile(
    rf"""^(?:(?:https?|ftp)://)?
    (?:[^\s:@/]+(?::[^\s@/]*)?@)?
    (?:localhost|(?:{_LABEL}\.)+[A-Za-z]{{2,63}}|(?:{_OCTET}\.){{3}}{_OCTET})
    (?::\d{{2,5}})?
    (?:[/?\#]\S*)?$""",
    re.VERBOSE | re.IGNORECASE,
)


@dataclass(frozen=True)
class ValidatorOptions:
    """
    Holds the precompiled patterns used by the string validators. Instances are immutable; use `with_patterns` to
    derive an instance with some patterns exchanged, e.g.:
    ```
    options = ValidatorOptions().with_patterns(phone_regexp=r"^\\d{10}$")
    ```
    """

    email_regexp: Pattern[str] = EMAIL_REGEXP
    phone_regexp: Pattern[str] = PHONE_REGEXP
    ipv4_regexp: Pattern[str] = IPV4_REGEXP
    ipv6_regexp: Pattern[str] = IPV6_REGEXP
    url_regexp: Pattern[str] = URL_REGEXP

    def with_patterns(self, **patterns: str | Pattern[str]) -> "ValidatorOptions":
        """
        Returns a copy of these options with the given patterns replaced. Plain strings get compiled.
        """
        compiled = {name: re.compile(pattern) for name, pattern in patterns.items()}
        return dataclasses.replace(self, **compiled)
