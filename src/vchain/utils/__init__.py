"""
Contains some useful utility functions used by the validator chains.
"""
from .predicates import ensure_str, is_absent_or_empty
