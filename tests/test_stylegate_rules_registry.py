# SPDX-License-Identifier: MIT
"""Tests for stylegate.rules.registry — RuleRegistry, RuleSet, build_rule_set."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from stylegate.errors import ConfigurationError, DuplicateRuleError
from stylegate.rules.base import Rule
from stylegate.rules.comma_spacing import CommaSpacingRule
from stylegate.rules.config import LintConfig
from stylegate.rules.indentation import IndentationWidthRule
from stylegate.rules.line_length import MaxLineLengthRule
from stylegate.rules.registry import RULE_REGISTRY, RuleRegistry, RuleSet, build_rule_set

DEFAULT_IDS = (
    "max-line-length",
    "space-after-comma",
    "space-around-colon",
    "indentation-width",
)


class TestRuleRegistry:
    def test_all_in_registration_order(self) -> None:
        registry = RuleRegistry()
        registry.register(IndentationWidthRule())
        registry.register(MaxLineLengthRule())
        assert [r.id for r in registry.all()] == ["indentation-width", "max-line-length"]

    def test_duplicate_rejected(self) -> None:
        registry = RuleRegistry()
        registry.register(CommaSpacingRule())
        with pytest.raises(DuplicateRuleError) as excinfo:
            registry.register(CommaSpacingRule())
        assert excinfo.value.rule_id == "space-after-comma"
        assert len(registry.all()) == 1

    def test_freeze(self) -> None:
        registry = RuleRegistry()
        registry.register(MaxLineLengthRule())
        rule_set = registry.freeze()
        assert isinstance(rule_set, RuleSet)
        assert rule_set.ids == ("max-line-length",)

    def test_empty(self) -> None:
        assert RuleRegistry().all() == ()


class TestRuleSet:
    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(DuplicateRuleError):
            RuleSet((MaxLineLengthRule(), MaxLineLengthRule()))

    def test_immutable(self) -> None:
        rule_set = RuleSet((MaxLineLengthRule(),))
        with pytest.raises(FrozenInstanceError):
            rule_set.rules = ()  # type: ignore[misc]

    def test_index_of(self) -> None:
        rule_set = build_rule_set()
        assert rule_set.index_of("max-line-length") == 0
        assert rule_set.index_of("indentation-width") == 3
        with pytest.raises(KeyError):
            rule_set.index_of("nope")

    def test_iter_and_len(self) -> None:
        rule_set = build_rule_set()
        assert len(rule_set) == 4
        assert tuple(r.id for r in rule_set) == DEFAULT_IDS

    def test_select_keeps_registration_order(self) -> None:
        narrowed = build_rule_set().select(["indentation-width", "max-line-length"])
        assert narrowed.ids == ("max-line-length", "indentation-width")

    def test_select_unknown_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown rule"):
            build_rule_set().select(["no-such-rule"])


class TestBuildRuleSet:
    def test_default_registry(self) -> None:
        assert build_rule_set().ids == DEFAULT_IDS
        assert len(RULE_REGISTRY) == 4

    def test_registry_classes_satisfy_protocol(self) -> None:
        for cls in RULE_REGISTRY:
            assert isinstance(cls(), Rule)

    def test_enabled_rules_narrow(self) -> None:
        config = LintConfig(enabled_rules={"space-around-colon"})
        assert build_rule_set(config).ids == ("space-around-colon",)

    def test_all_enabled_when_unset(self) -> None:
        assert build_rule_set(LintConfig()).ids == DEFAULT_IDS

    def test_unknown_enabled_rule(self) -> None:
        config = LintConfig(enabled_rules={"max-line-length", "tabs"})
        with pytest.raises(ConfigurationError):
            build_rule_set(config)

    def test_custom_classes_duplicate(self) -> None:
        with pytest.raises(DuplicateRuleError):
            build_rule_set(rule_classes=[MaxLineLengthRule, MaxLineLengthRule])
