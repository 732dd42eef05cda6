# SPDX-License-Identifier: MIT
"""Rule: space-after-comma — a comma is followed by exactly one space."""

from __future__ import annotations

from stylegate.rules.base import RuleOutcome, RuleSeverity
from stylegate.rules.config import LintConfig
from stylegate.rules.context import LineFact


class CommaSpacingRule:
    """Flag commas not followed by a single space, except at end of line."""

    id = "space-after-comma"
    description = "A comma is followed by exactly one space"
    default_severity = RuleSeverity.WARNING

    def check(self, fact: LineFact, config: LintConfig) -> list[RuleOutcome]:
        outcomes: list[RuleOutcome] = []
        last = len(fact.text) - 1
        for offset in fact.commas:
            if offset == last or fact.single_space_after(offset):
                continue
            outcomes.append(
                RuleOutcome(
                    message="Missing single space after ','",
                    column=offset + 1,
                    suggestion="use exactly one space after ','",
                )
            )
        return outcomes
