# SPDX-License-Identifier: MIT
"""Tests for rule: indentation-width."""

from __future__ import annotations

from stylegate.rules.config import LintConfig
from stylegate.rules.context import scan_line
from stylegate.rules.indentation import IndentationWidthRule


def _check(line: str, config: LintConfig | None = None) -> list:
    config = config or LintConfig()
    return IndentationWidthRule().check(scan_line(1, line, tab_width=config.tab_width), config)


class TestIndentationWidth:
    def test_multiple_of_default(self) -> None:
        assert _check("x") == []
        assert _check("  x") == []
        assert _check("    x") == []

    def test_odd_indent(self) -> None:
        outcomes = _check("   x")
        assert len(outcomes) == 1
        assert outcomes[0].message == "Indentation of 3 is not a multiple of 2"
        assert outcomes[0].suggestion == "indent to 2 or 4 columns"
        assert outcomes[0].column == 1

    def test_custom_indent_size(self) -> None:
        config = LintConfig(indent_size=4)
        assert _check("        x", config) == []
        outcomes = _check("      x", config)
        assert outcomes[0].suggestion == "indent to 4 or 8 columns"

    def test_blank_and_whitespace_only_lines_skipped(self) -> None:
        assert _check("") == []
        assert _check("   ") == []

    def test_tabs_use_tab_width(self) -> None:
        assert _check("\tx", LintConfig(tab_width=2)) == []
        assert len(_check("\tx")) == 1
