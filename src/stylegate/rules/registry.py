# SPDX-License-Identifier: MIT
"""Rule registry — setup-time registration and the immutable RuleSet."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from stylegate.errors import ConfigurationError, DuplicateRuleError
from stylegate.rules.base import Rule
from stylegate.rules.colon_spacing import ColonSpacingRule
from stylegate.rules.comma_spacing import CommaSpacingRule
from stylegate.rules.config import LintConfig
from stylegate.rules.indentation import IndentationWidthRule
from stylegate.rules.line_length import MaxLineLengthRule

RULE_REGISTRY: list[type[Rule]] = [
    MaxLineLengthRule,
    CommaSpacingRule,
    ColonSpacingRule,
    IndentationWidthRule,
]


@dataclass(frozen=True)
class RuleSet:
    """Ordered, duplicate-free collection of rules. Read-only once built."""

    rules: tuple[Rule, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise DuplicateRuleError(rule.id)
            seen.add(rule.id)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(rule.id for rule in self.rules)

    def index_of(self, rule_id: str) -> int:
        """Registration index of *rule_id*. Raises KeyError if absent."""
        for i, rule in enumerate(self.rules):
            if rule.id == rule_id:
                return i
        raise KeyError(rule_id)

    def select(self, enabled: Iterable[str]) -> RuleSet:
        """Return a RuleSet narrowed to *enabled*, keeping registration order.

        Raises:
            ConfigurationError: If *enabled* names a rule that is not registered.
        """
        wanted = set(enabled)
        unknown = wanted - set(self.ids)
        if unknown:
            msg = f"Unknown rule(s): {sorted(unknown)}. Known rules: {list(self.ids)}"
            raise ConfigurationError(msg)
        return RuleSet(tuple(rule for rule in self.rules if rule.id in wanted))


class RuleRegistry:
    """Collects rules during setup, then freezes them into a RuleSet."""

    def __init__(self) -> None:
        self._rules: list[Rule] = []
        self._ids: set[str] = set()

    def register(self, rule: Rule) -> None:
        """Add *rule* after the ones already registered.

        Raises:
            DuplicateRuleError: If a rule with the same id is already registered.
        """
        if rule.id in self._ids:
            raise DuplicateRuleError(rule.id)
        self._ids.add(rule.id)
        self._rules.append(rule)

    def all(self) -> tuple[Rule, ...]:
        """Registered rules in registration order."""
        return tuple(self._rules)

    def freeze(self) -> RuleSet:
        return RuleSet(self.all())


def build_rule_set(
    config: LintConfig | None = None,
    rule_classes: list[type[Rule]] | None = None,
) -> RuleSet:
    """Instantiate and register rule classes, narrowed to ``config.enabled_rules``."""
    registry = RuleRegistry()
    for cls in RULE_REGISTRY if rule_classes is None else rule_classes:
        registry.register(cls())
    rule_set = registry.freeze()
    if config is not None and config.enabled_rules is not None:
        rule_set = rule_set.select(config.enabled_rules)
    return rule_set
