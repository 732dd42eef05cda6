# SPDX-License-Identifier: MIT
"""Rule: space-around-colon — no space before a colon, one space after."""

from __future__ import annotations

from stylegate.rules.base import RuleOutcome, RuleSeverity
from stylegate.rules.config import LintConfig
from stylegate.rules.context import LineFact


class ColonSpacingRule:
    """Flag whitespace before a colon and anything but one space after it.

    A colon that ends the line needs nothing after it. A colon at the very
    start of the line has nothing before it to check.
    """

    id = "space-around-colon"
    description = "No space before a colon and exactly one space after it"
    default_severity = RuleSeverity.WARNING

    def check(self, fact: LineFact, config: LintConfig) -> list[RuleOutcome]:
        outcomes: list[RuleOutcome] = []
        text = fact.text
        last = len(text) - 1
        for offset in fact.colons:
            if offset > 0 and text[offset - 1] in " \t":
                outcomes.append(
                    RuleOutcome(
                        message="Unexpected space before ':'",
                        column=offset + 1,
                        suggestion="remove the space before ':'",
                    )
                )
            if offset != last and not fact.single_space_after(offset):
                outcomes.append(
                    RuleOutcome(
                        message="Missing single space after ':'",
                        column=offset + 1,
                        suggestion="use exactly one space after ':'",
                    )
                )
        return outcomes
