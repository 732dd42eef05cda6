# SPDX-License-Identifier: MIT
"""Style rule engine — line facts in, ordered violations out."""

from __future__ import annotations

from collections.abc import Iterable

from stylegate.rules.base import Rule, RuleOutcome, RuleSeverity, Violation, ViolationKind
from stylegate.rules.config import LintConfig, ProfileConfig, load_config, load_profile
from stylegate.rules.context import LineFact, lines_from_text, scan
from stylegate.rules.engine import RuleEngine, check_gate, evaluate
from stylegate.rules.registry import RuleRegistry, RuleSet, build_rule_set

__all__ = [
    "LineFact",
    "LintConfig",
    "ProfileConfig",
    "Rule",
    "RuleEngine",
    "RuleOutcome",
    "RuleRegistry",
    "RuleSet",
    "RuleSeverity",
    "Violation",
    "ViolationKind",
    "build_rule_set",
    "check_gate",
    "evaluate",
    "lines_from_text",
    "lint_lines",
    "load_config",
    "load_profile",
    "scan",
]


def lint_lines(lines: Iterable[str], config: LintConfig | None = None) -> list[Violation]:
    """Convenience: build the default rule set, scan, evaluate, return violations."""
    config = config or LintConfig()
    engine = RuleEngine(build_rule_set(config), config)
    return engine.run(lines)
