# SPDX-License-Identifier: MIT
"""Rule: max-line-length — soft limit warns, hard limit errors."""

from __future__ import annotations

from stylegate.rules.base import RuleOutcome, RuleSeverity
from stylegate.rules.config import LintConfig
from stylegate.rules.context import LineFact


class MaxLineLengthRule:
    """Flag lines longer than the soft limit (warning) or hard limit (error)."""

    id = "max-line-length"
    description = "Lines should fit within the soft limit and must fit within the hard limit"
    default_severity = RuleSeverity.WARNING

    def check(self, fact: LineFact, config: LintConfig) -> list[RuleOutcome]:
        if fact.length > config.hard_limit:
            return [
                RuleOutcome(
                    message=f"Line is {fact.length} columns, exceeds hard limit of {config.hard_limit}",
                    severity=RuleSeverity.ERROR,
                    suggestion=f"break the line to at most {config.soft_limit} columns",
                )
            ]
        if fact.length > config.soft_limit:
            return [
                RuleOutcome(
                    message=f"Line is {fact.length} columns, exceeds soft limit of {config.soft_limit}",
                    severity=RuleSeverity.WARNING,
                    suggestion=f"break the line to at most {config.soft_limit} columns",
                )
            ]
        return []
