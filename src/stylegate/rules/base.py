# SPDX-License-Identifier: MIT
"""Severity, outcome and violation dataclasses, and the Rule protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stylegate.rules.config import LintConfig
    from stylegate.rules.context import LineFact


class RuleSeverity(IntEnum):
    """Severity levels for violations, ordered for gate comparison."""

    WARNING = 1
    ERROR = 2


class ViolationKind(StrEnum):
    RULE = "rule"
    RULE_FAULT = "rule-fault"


@dataclass(frozen=True)
class RuleOutcome:
    """One failed check reported by a rule for a single line.

    ``severity`` overrides the rule's default when set.
    """

    message: str
    column: int | None = None
    severity: RuleSeverity | None = None
    suggestion: str | None = None


@dataclass(frozen=True)
class Violation:
    """A single rule failure tied to a line (and optionally a 1-based column)."""

    rule_id: str
    line: int
    message: str
    severity: RuleSeverity
    column: int | None = None
    kind: ViolationKind = ViolationKind.RULE
    suggestion: str | None = None


@runtime_checkable
class Rule(Protocol):
    """Protocol that every style rule must satisfy."""

    id: str
    description: str
    default_severity: RuleSeverity

    def check(self, fact: LineFact, config: LintConfig) -> list[RuleOutcome]: ...
