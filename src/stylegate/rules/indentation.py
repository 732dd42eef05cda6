# SPDX-License-Identifier: MIT
"""Rule: indentation-width — indentation is a multiple of the indent size."""

from __future__ import annotations

from stylegate.rules.base import RuleOutcome, RuleSeverity
from stylegate.rules.config import LintConfig
from stylegate.rules.context import LineFact


class IndentationWidthRule:
    """Flag leading whitespace that is not a multiple of the indent size."""

    id = "indentation-width"
    description = "Indentation is a multiple of the configured indent size"
    default_severity = RuleSeverity.WARNING

    def check(self, fact: LineFact, config: LintConfig) -> list[RuleOutcome]:
        # Whitespace-only lines carry no indentation of their own
        if fact.is_blank:
            return []
        remainder = fact.indent % config.indent_size
        if remainder == 0:
            return []
        lower = fact.indent - remainder
        upper = lower + config.indent_size
        return [
            RuleOutcome(
                message=(
                    f"Indentation of {fact.indent} is not a multiple of {config.indent_size}"
                ),
                column=1,
                suggestion=f"indent to {lower} or {upper} columns",
            )
        ]
