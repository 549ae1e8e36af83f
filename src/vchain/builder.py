"""
Contains the ValidatorChain which evaluates an ordered sequence of validator functions against a value.
"""
import logging
from typing import Generic, Iterable, Optional

from .defaults import get_locale, get_options
from .errors import LocaleResolutionError
from .locale import FormValidatorLocale, create_locale
from .options import ValidatorOptions
from .types import ChainT, Configurator, T, ValidationCallback
from .utils import is_absent_or_empty

_logger = logging.getLogger(__name__)


def _evaluate(validations: Iterable[ValidationCallback[T]], optional: bool, value: Optional[T]) -> Optional[str]:
    for validate in validations:
        if optional and is_absent_or_empty(value):
            return None
        result = validate(value)
        if result is not None:
            return result
    return None


class ValidatorChain(Generic[T]):
    """
    A ValidatorChain holds an ordered list of validator functions. A validator function receives the value and
    returns an error message or None if the value is valid. `test` runs the validators in insertion order and returns
    the first error message (fail-fast). Every builder method returns the chain itself, so calls can be chained:
    ```
    validate_name = StringValidatorChain().min_length(2).max_length(50).build()
    assert validate_name("Jo") is None
    ```
    Unless the chain is `optional`, a required check is added on construction. An optional chain accepts None and
    the empty string without running any validator.
    """

    def __init__(
        self,
        optional: bool = False,
        required_message: Optional[str] = None,
        options: Optional[ValidatorOptions] = None,
        locale_name: Optional[str] = None,
        locale: Optional[FormValidatorLocale] = None,
    ):
        if locale is None:
            locale = get_locale() if locale_name is None else create_locale(locale_name)
        if locale is None:
            raise LocaleResolutionError(locale_name)
        self._optional = optional
        self.required_message = required_message
        self._locale: FormValidatorLocale = locale
        self._options: ValidatorOptions = options if options is not None else get_options()
        self.validations: list[ValidationCallback[T]] = []
        # All validators added after the required check may expect a value which is not None.
        if not self._optional:
            self.required(self.required_message)

    @property
    def optional(self) -> bool:
        """If True, None and the empty string are valid regardless of the attached validators"""
        return self._optional

    @property
    def locale(self) -> FormValidatorLocale:
        """The locale captured on construction"""
        return self._locale

    @property
    def options(self) -> ValidatorOptions:
        """The options bag captured on construction"""
        return self._options

    def __repr__(self):
        return (
            f"{type(self).__name__}(optional={self._optional}, locale={self._locale.name!r}, "
            f"validations={len(self.validations)})"
        )

    def reset(self: ChainT) -> ChainT:
        """
        Removes all validators and adds the required check again if the chain is not optional.
        """
        _logger.debug("Resetting %r", self)
        self.validations.clear()
        if not self._optional:
            self.required(self.required_message)
        return self

    def add(self: ChainT, validator: ValidationCallback[T]) -> ChainT:
        """Appends `validator` to the chain"""
        self.validations.append(validator)
        return self

    def test(self, value: Optional[T]) -> Optional[str]:
        """
        Runs the validators on `value` in insertion order and returns the first error message.
        Returns None if every validator passed.
        """
        return _evaluate(self.validations, self._optional, value)

    __call__ = test

    def build(self) -> ValidationCallback[T]:
        """
        Returns a validator function for the current state of the chain. The returned function is decoupled from the
        chain: validators added afterwards or a `reset` do not affect it.
        """
        validations = tuple(self.validations)
        optional = self._optional

        def validate(value: Optional[T]) -> Optional[str]:
            return _evaluate(validations, optional, value)

        return validate

    def _sub_chain(self: ChainT) -> ChainT:
        """
        Creates an empty, non-optional chain of the same class sharing locale and options with this chain. Used by
        `or_`; subclasses whose `__init__` does not accept `locale` and `options` keywords have to override it.
        """
        return type(self)(locale=self._locale, options=self._options)

    def or_(
        self: ChainT,
        left: Configurator[ChainT],
        right: Configurator[ChainT],
        *,
        reverse: bool = False,
    ) -> ChainT:
        """
        Adds a validator which fails only if both `left` and `right` fail. Both configurators receive a new sub chain
        created by `_sub_chain`. The right side is not evaluated if the left side passes. If both fail, the error of the right side is returned, or the error of the left side if `reverse` is True.
        """
        left_chain = self._sub_chain()
        right_chain = self._sub_chain()

        left(left_chain)
        right(right_chain)

        validate_left = left_chain.build()
        validate_right = right_chain.build()

        def validate(value: Optional[T]) -> Optional[str]:
            left_result = validate_left(value)
            if left_result is None:
                return None
            right_result = validate_right(value)
            if right_result is None:
                return None
            return left_result if reverse else right_result

        return self.add(validate)

    def required(self: ChainT, message: Optional[str] = None) -> ChainT:
        """The value must not be None or an empty string"""
        locale = self._locale

        def validate(value):
            if is_absent_or_empty(value):
                return message if message is not None else locale.required()
            return None

        return self.add(validate)


GenericValidationBuilder = ValidatorChain
