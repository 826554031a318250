"""Tests for RuleEvaluator."""

import doctest

import pytest

from depignore import (
    DEFAULT_REQUIREMENT,
    PackageSubject,
    PlatformKind,
    RuleEvaluator,
    parse_requirement,
)


class TestApply:
    """Tests for RuleEvaluator.apply."""

    @pytest.mark.parametrize(
        "requirement",
        [None, DEFAULT_REQUIREMENT, parse_requirement(">= 1.0, < 2.0"), parse_requirement("= 99")],
    )
    def test_complete_yields_default(self, make_evaluator, requirement):
        evaluator = make_evaluator({"left-pad": "complete"})
        assert evaluator.apply("left-pad", requirement) is DEFAULT_REQUIREMENT

    def test_upper_only_strips_upper_bounds(self, make_evaluator):
        evaluator = make_evaluator({"left-pad": "upper"})
        result = evaluator.apply("left-pad", parse_requirement([">=1.0", "<2.0"]))
        assert result == parse_requirement(">=1.0")
        assert result.is_satisfied_by("1.5")
        assert result.is_satisfied_by("3.0")

    def test_upper_only_with_none_yields_default(self, make_evaluator):
        evaluator = make_evaluator({"left-pad": "upper"})
        assert evaluator.apply("left-pad", None) is DEFAULT_REQUIREMENT

    def test_no_rule_returns_same_object(self, make_evaluator):
        evaluator = make_evaluator({"other": "complete"})
        requirement = parse_requirement(">= 1.0, < 2.0")
        assert evaluator.apply("left-pad", requirement) is requirement
        assert evaluator.apply("left-pad", None) is None

    def test_empty_evaluator_is_transparent(self, empty_evaluator):
        requirement = parse_requirement("~> 1.2")
        assert empty_evaluator.apply("anything", requirement) is requirement
        assert empty_evaluator.apply(PlatformKind.RUNTIME, requirement) is requirement

    def test_names_are_normalized(self, make_evaluator):
        evaluator = make_evaluator({"Left_Pad": "complete"})
        assert evaluator.is_completely_ignored("left-pad")
        assert evaluator.is_completely_ignored(PackageSubject("LEFT.PAD"))

    def test_platform_rule_does_not_affect_same_named_package(self, make_evaluator):
        evaluator = make_evaluator({PlatformKind.RUNTIME: "complete"})
        requirement = parse_requirement("< 3")
        assert evaluator.apply("runtime", requirement) is requirement
        assert evaluator.apply(PlatformKind.RUNTIME, requirement) is DEFAULT_REQUIREMENT


class TestPredicates:
    """Tests for the boolean helpers."""

    def test_completely_ignored(self, make_evaluator):
        evaluator = make_evaluator({"left-pad": "complete", "core": "upper"})
        assert evaluator.is_completely_ignored("left-pad")
        assert not evaluator.is_completely_ignored("core")
        assert not evaluator.is_completely_ignored("missing")

    def test_upper_only_ignored(self, make_evaluator):
        evaluator = make_evaluator({"left-pad": "complete", "core": "upper"})
        assert evaluator.is_upper_only_ignored("core")
        assert not evaluator.is_upper_only_ignored("left-pad")
        assert not evaluator.is_upper_only_ignored("missing")

    def test_has_rules(self, make_evaluator, empty_evaluator):
        assert make_evaluator({"x": "complete"}).has_rules
        assert not empty_evaluator.has_rules

    def test_default_evaluator_has_empty_snapshot(self):
        evaluator = RuleEvaluator()
        assert not evaluator.has_rules
        assert evaluator.completely_ignored_package_names == frozenset()

    def test_docstring_example(self):
        from depignore import evaluator as evaluator_module

        results = doctest.testmod(evaluator_module)
        assert results.attempted > 0
        assert results.failed == 0
