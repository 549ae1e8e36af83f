"""
Contains the predicates shared by the validator chains.
"""
from typing import Any

from typeguard import TypeCheckError, check_type


def is_absent_or_empty(value: Any) -> bool:
    """
    True if the value is None or an empty string. Only strings are treated as "empty"; e.g. an empty list is a
    present value.
    """
    return value is None or (isinstance(value, str) and len(value) == 0)


def ensure_str(value: Any, validator_name: str) -> str:
    """
    Checks that a string validator received a string. Anything else is a programming error and raises a
    TypeCheckError naming the validator.
    """
    try:
        return check_type(value, str)
    except TypeCheckError as error:
        raise TypeCheckError(f"{validator_name}: {error}") from error
