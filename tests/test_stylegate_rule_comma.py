# SPDX-License-Identifier: MIT
"""Tests for rule: space-after-comma."""

from __future__ import annotations

from stylegate.rules.base import RuleSeverity
from stylegate.rules.comma_spacing import CommaSpacingRule
from stylegate.rules.config import LintConfig
from stylegate.rules.context import scan_line


def _check(line: str) -> list:
    return CommaSpacingRule().check(scan_line(1, line), LintConfig())


class TestCommaSpacing:
    def test_well_spaced(self) -> None:
        assert _check("f(a, b, c)") == []

    def test_missing_spaces_each_reported(self) -> None:
        outcomes = _check("val x = Seq(1,2,3)")
        assert [o.column for o in outcomes] == [14, 16]
        assert all("','" in o.message for o in outcomes)

    def test_double_space(self) -> None:
        outcomes = _check("f(a,  b)")
        assert [o.column for o in outcomes] == [4]

    def test_tab_after_comma(self) -> None:
        assert len(_check("f(a,\tb)")) == 1

    def test_comma_at_end_of_line(self) -> None:
        assert _check("foo(a,") == []
        assert _check("foo(a,\n") == []

    def test_single_trailing_space_after_comma(self) -> None:
        assert _check("foo(a, ") == []

    def test_no_commas(self) -> None:
        assert _check("val x = 1") == []

    def test_default_severity_is_warning(self) -> None:
        assert CommaSpacingRule.default_severity == RuleSeverity.WARNING
        assert _check("a,b")[0].severity is None
