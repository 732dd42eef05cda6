# SPDX-License-Identifier: MIT
"""Rule evaluator — applies a RuleSet to scanned lines in a deterministic order."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stylegate.rules.base import Rule, RuleOutcome, RuleSeverity, Violation, ViolationKind
from stylegate.rules.context import LineFact, scan

if TYPE_CHECKING:
    from stylegate.rules.config import LintConfig, ProfileConfig
    from stylegate.rules.registry import RuleSet

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleApplication:
    """Result of applying one rule to one line: outcomes, or the fault it raised."""

    outcomes: tuple[RuleOutcome, ...] = ()
    fault: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.fault is None


def apply_rule(rule: Rule, fact: LineFact, config: LintConfig) -> RuleApplication:
    """Run a single rule predicate, capturing any exception it raises.

    The result is materialized inside the guard, so a lazy ``check`` that
    raises mid-iteration, or one that returns something other than an
    iterable of RuleOutcome, is captured as a fault too.
    """
    try:
        outcomes = tuple(rule.check(fact, config))
        for outcome in outcomes:
            if not isinstance(outcome, RuleOutcome):
                raise TypeError(f"check() yielded {type(outcome).__name__}, expected RuleOutcome")
    except Exception as exc:  # noqa: BLE001
        return RuleApplication(fault=exc)
    return RuleApplication(outcomes=outcomes)


def _column_key(outcome: RuleOutcome) -> int:
    return 0 if outcome.column is None else outcome.column


def _fault_violation(rule: Rule, fact: LineFact, fault: Exception) -> Violation:
    log.warning(
        "Rule %s faulted on line %d: %s: %s", rule.id, fact.number, type(fault).__name__, fault
    )
    return Violation(
        rule_id=rule.id,
        line=fact.number,
        message=f"Rule raised {type(fault).__name__}: {fault}",
        severity=RuleSeverity.ERROR,
        kind=ViolationKind.RULE_FAULT,
    )


def evaluate(rule_set: RuleSet, facts: Iterable[LineFact], config: LintConfig) -> list[Violation]:
    """Apply every rule to every line.

    Violations come out ordered by line, then rule registration order, then
    column (column-less first). A rule that raises yields one RuleFault
    violation for that line and evaluation carries on.
    """
    violations: list[Violation] = []
    for fact in facts:
        for rule in rule_set:
            applied = apply_rule(rule, fact, config)
            if applied.fault is not None:
                violations.append(_fault_violation(rule, fact, applied.fault))
                continue
            for outcome in sorted(applied.outcomes, key=_column_key):
                violations.append(
                    Violation(
                        rule_id=rule.id,
                        line=fact.number,
                        column=outcome.column,
                        message=outcome.message,
                        severity=outcome.severity or rule.default_severity,
                        suggestion=outcome.suggestion,
                    )
                )
    return violations


def check_gate(violations: Iterable[Violation], profile: ProfileConfig) -> bool:
    """Return True if any violation meets or exceeds the profile's fail_on threshold."""
    return any(v.severity.value >= profile.fail_on.value for v in violations)


class RuleEngine:
    """Binds a RuleSet and options; scans and evaluates line sequences."""

    def __init__(self, rule_set: RuleSet, config: LintConfig) -> None:
        self.rule_set = rule_set
        self.config = config

    def run(self, lines: Iterable[str]) -> list[Violation]:
        """Scan *lines* and evaluate every rule against them."""
        facts = scan(lines, tab_width=self.config.tab_width, operators=self.config.operators)
        return evaluate(self.rule_set, facts, self.config)

    def check_gate(self, violations: Iterable[Violation], profile: ProfileConfig) -> bool:
        return check_gate(violations, profile)
