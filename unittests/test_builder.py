from typing import Optional

import pytest

from vchain import GenericValidationBuilder, LocaleResolutionError, ValidatorChain, create_locale


def fail_with(message: str):
    def validate(_value) -> Optional[str]:
        return message

    return validate


def accept_only(expected, message: str):
    def validate(value) -> Optional[str]:
        return None if value == expected else message

    return validate


REQUIRED = "The field is required."


class TestValidatorChain:
    @pytest.mark.parametrize("value", [None, ""])
    def test_required_chain_rejects_absent_values(self, value):
        assert ValidatorChain[str]().test(value) == REQUIRED

    @pytest.mark.parametrize("value", ["a", " ", 0, False, [], 42])
    def test_required_chain_accepts_present_values(self, value):
        assert ValidatorChain().test(value) is None

    def test_required_message_override(self):
        assert ValidatorChain(required_message="Please enter a name").test(None) == "Please enter a name"

    @pytest.mark.parametrize("value", [None, ""])
    def test_optional_chain_bypasses_failing_validators(self, value):
        chain = ValidatorChain(optional=True).add(fail_with("A")).add(fail_with("B"))
        assert chain.test(value) is None

    def test_optional_chain_runs_validators_for_present_values(self):
        chain = ValidatorChain(optional=True).add(fail_with("A"))
        assert chain.test("x") == "A"

    def test_optional_chain_has_no_implicit_required_check(self):
        chain = ValidatorChain(optional=True)
        assert chain.validations == []
        assert chain.test(None) is None

    def test_optional_chain_with_explicit_required_check_still_bypasses(self):
        chain = ValidatorChain(optional=True).required()
        assert len(chain.validations) == 1
        assert chain.test("") is None

    def test_first_failure_wins(self):
        chain = ValidatorChain().add(fail_with("A")).add(fail_with("B"))
        assert chain.test("x") == "A"

    def test_validators_after_a_failure_are_not_called(self):
        calls = []

        def record(value):
            calls.append(value)

        ValidatorChain().add(fail_with("A")).add(record).test("x")
        assert calls == []

    def test_required_check_runs_first(self):
        chain = ValidatorChain().add(fail_with("A"))
        assert chain.test(None) == REQUIRED
        assert chain.test("x") == "A"

    def test_duplicate_validators_are_kept(self):
        validate = fail_with("A")
        chain = ValidatorChain(optional=True).add(validate).add(validate)
        assert chain.validations == [validate, validate]

    def test_redundant_required_checks_are_harmless(self):
        chain = ValidatorChain().required("second")
        assert chain.test(None) == REQUIRED
        assert chain.test("x") is None

    def test_builder_methods_return_the_chain(self):
        chain = ValidatorChain()
        assert chain.add(fail_with("A")) is chain
        assert chain.required() is chain
        assert chain.reset() is chain
        assert chain.or_(lambda _: None, lambda _: None) is chain

    def test_reset_restores_a_fresh_chain(self):
        chain = ValidatorChain().add(fail_with("A")).add(fail_with("B")).reset()
        fresh = ValidatorChain()
        assert len(chain.validations) == 1
        for value in (None, "", "x", 3):
            assert chain.test(value) == fresh.test(value)

    def test_reset_keeps_the_required_message(self):
        chain = ValidatorChain(required_message="needed").add(fail_with("A")).reset()
        assert chain.test(None) == "needed"

    def test_reset_of_optional_chain_clears_everything(self):
        chain = ValidatorChain(optional=True).add(fail_with("A")).reset()
        assert chain.validations == []

    def test_chain_is_callable(self):
        chain = ValidatorChain().add(fail_with("A"))
        assert chain("x") == "A"

    def test_chain_can_be_nested_as_validator(self):
        inner = ValidatorChain(optional=True).add(accept_only("a", "not a"))
        outer = ValidatorChain().add(inner)
        assert outer.test("a") is None
        assert outer.test("b") == "not a"

    def test_generic_validation_builder_alias(self):
        assert GenericValidationBuilder is ValidatorChain


class TestBuild:
    def test_build_is_idempotent(self):
        validate = ValidatorChain().add(accept_only("a", "not a")).build()
        assert validate("b") == validate("b") == "not a"
        assert validate("a") is validate("a") is None

    def test_built_validator_is_a_snapshot(self):
        chain = ValidatorChain().add(accept_only("a", "not a"))
        validate = chain.build()
        chain.reset()
        chain.add(fail_with("changed"))
        assert validate("a") is None
        assert validate("b") == "not a"
        assert chain.test("a") == "changed"

    def test_built_validator_keeps_optional_bypass(self):
        validate = ValidatorChain(optional=True).add(fail_with("A")).build()
        assert validate(None) is None
        assert validate("x") == "A"


class TestOr:
    @staticmethod
    def make_chain(reverse: bool = False) -> ValidatorChain:
        return ValidatorChain().or_(
            lambda left: left.add(accept_only("a", "left failed")),
            lambda right: right.add(accept_only("b", "right failed")),
            reverse=reverse,
        )

    @pytest.mark.parametrize("value", ["a", "b"])
    def test_either_side_accepts(self, value):
        assert self.make_chain().test(value) is None

    def test_right_message_by_default(self):
        assert self.make_chain().test("c") == "right failed"

    def test_left_message_if_reversed(self):
        assert self.make_chain(reverse=True).test("c") == "left failed"

    def test_right_side_is_not_evaluated_if_left_passes(self):
        calls = []

        def record(value):
            calls.append(value)
            return "right failed"

        chain = ValidatorChain().or_(
            lambda left: left.add(accept_only("a", "left failed")),
            lambda right: right.add(record),
        )
        assert chain.test("a") is None
        assert calls == []
        assert chain.test("c") == "right failed"
        assert calls == ["c"]

    def test_sub_chains_are_required_and_share_locale_and_options(self):
        locale = create_locale("de")
        sub_chains = []
        chain = ValidatorChain(locale=locale).or_(sub_chains.append, sub_chains.append)
        assert [type(sub) for sub in sub_chains] == [ValidatorChain, ValidatorChain]
        assert all(sub.locale is locale and sub.options is chain.options for sub in sub_chains)
        assert not any(sub.optional for sub in sub_chains)

    def test_or_on_optional_chain(self):
        chain = ValidatorChain(optional=True).or_(
            lambda left: left.add(accept_only("a", "left failed")),
            lambda right: right.add(accept_only("b", "right failed")),
        )
        assert chain.test("") is None
        assert chain.test("c") == "right failed"

    def test_configuring_sub_chain_after_or_has_no_effect(self):
        sub_chains = []
        chain = ValidatorChain().or_(sub_chains.append, lambda right: right.add(fail_with("right failed")))
        sub_chains[0].add(fail_with("late"))
        assert chain.test("x") is None

    def test_subclass_with_own_signature_overrides_sub_chain(self):
        class PrefixedChain(ValidatorChain[str]):
            def __init__(self, prefix: str, **kwargs):
                super().__init__(**kwargs)
                self.prefix = prefix

            def _sub_chain(self) -> "PrefixedChain":
                return PrefixedChain(self.prefix, locale=self.locale, options=self.options)

        sub_chains = []
        chain = PrefixedChain("id-").or_(
            lambda left: sub_chains.append(left.add(accept_only("id-a", "left failed"))),
            lambda right: sub_chains.append(right.add(accept_only("id-b", "right failed"))),
        )
        assert [sub.prefix for sub in sub_chains] == ["id-", "id-"]
        assert all(sub.locale is chain.locale and not sub.optional for sub in sub_chains)
        assert chain.test("id-b") is None
        assert chain.test("id-c") == "right failed"


class TestLocaleResolution:
    def test_explicit_locale_wins_over_name(self):
        locale = create_locale("fr")
        assert ValidatorChain(locale=locale, locale_name="de").locale is locale

    def test_locale_name(self):
        assert ValidatorChain(locale_name="de").test(None) == "Dieses Feld ist erforderlich."

    def test_unknown_locale_name_fails_fast(self):
        with pytest.raises(LocaleResolutionError, match="klingon"):
            ValidatorChain(locale_name="klingon")
