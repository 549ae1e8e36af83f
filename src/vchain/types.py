"""
Contains the types used in the validation chains
"""
from typing import TYPE_CHECKING, Callable, Optional, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .builder import ValidatorChain

T = TypeVar("T")
ChainT = TypeVar("ChainT", bound="ValidatorChain")

ValidationCallback: TypeAlias = Callable[[Optional[T]], Optional[str]]
StringValidationCallback: TypeAlias = Callable[[Optional[str]], Optional[str]]
Configurator: TypeAlias = Callable[[ChainT], object]
"""
A callable which receives a freshly created sub chain and attaches validators to it (see `ValidatorChain.or_`).
Its return value is ignored.
"""
