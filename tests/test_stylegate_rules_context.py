# SPDX-License-Identifier: MIT
"""Tests for stylegate.rules.context — line scanner and LineFact."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import FrozenInstanceError

import pytest

from stylegate.rules.context import LineFact, lines_from_text, scan, scan_line


class TestScan:
    def test_empty_input(self) -> None:
        assert list(scan([])) == []

    def test_is_lazy_iterator(self) -> None:
        assert isinstance(scan(["a"]), Iterator)

    def test_does_not_mutate_input(self) -> None:
        lines = ["a,b\n", "c: d\n"]
        list(scan(lines))
        assert lines == ["a,b\n", "c: d\n"]

    def test_numbers_follow_input_order(self) -> None:
        facts = list(scan(["first\n", "second\n", "third"]))
        assert [f.number for f in facts] == [1, 2, 3]
        assert [f.text for f in facts] == ["first", "second", "third"]

    def test_empty_line(self) -> None:
        facts = list(scan(["", "\n"]))
        assert len(facts) == 2
        for fact in facts:
            assert fact.length == 0
            assert fact.indent == 0
            assert fact.commas == ()
            assert fact.colons == ()
            assert fact.operators == ()

    def test_final_line_without_newline(self) -> None:
        facts = list(scan(["a\n", "b"]))
        assert facts[-1].number == 2
        assert facts[-1].text == "b"
        assert facts[-1].length == 1

    def test_terminators_stripped(self) -> None:
        assert scan_line(1, "abc\r\n").text == "abc"
        assert scan_line(1, "abc\r").length == 3
        assert scan_line(1, "abc\n").length == 3


class TestScanLine:
    def test_commas_and_colons(self) -> None:
        fact = scan_line(1, "a, b: c")
        assert fact.length == 7
        assert fact.commas == (1,)
        assert fact.colons == (4,)

    def test_leading_whitespace(self) -> None:
        assert scan_line(1, "    x").indent == 4
        assert scan_line(1, "x    ").indent == 0

    def test_tab_counts_one_column_by_default(self) -> None:
        fact = scan_line(1, "\tx")
        assert fact.length == 2
        assert fact.indent == 1

    def test_tab_width_configurable(self) -> None:
        fact = scan_line(1, "\tx\t", tab_width=4)
        assert fact.length == 9
        assert fact.indent == 4

    def test_double_colon_is_operator(self) -> None:
        fact = scan_line(1, "a :: b")
        assert fact.colons == ()
        assert (2, "::") in fact.operators

    def test_walrus_is_operator(self) -> None:
        fact = scan_line(1, "x := 1")
        assert fact.colons == ()
        assert fact.operators == ((2, ":="),)

    def test_longest_operator_wins(self) -> None:
        fact = scan_line(1, "a<=b")
        assert fact.operators == ((1, "<="),)

    def test_custom_operator_set(self) -> None:
        fact = scan_line(1, "a+b=c", operators=("+",))
        assert fact.operators == ((1, "+"),)

    def test_no_lexical_awareness(self) -> None:
        fact = scan_line(1, 'println("a,b")')
        assert fact.commas == (10,)

    def test_is_blank(self) -> None:
        assert scan_line(1, "   ").is_blank
        assert not scan_line(1, "  x").is_blank

    def test_single_space_after(self) -> None:
        fact = scan_line(1, "a, b,  c,d, ")
        assert fact.single_space_after(1)
        assert not fact.single_space_after(4)
        assert not fact.single_space_after(8)
        assert fact.single_space_after(10)

    def test_linefact_is_frozen(self) -> None:
        fact = LineFact(number=1, text="x", length=1, indent=0)
        with pytest.raises(FrozenInstanceError):
            fact.length = 2  # type: ignore[misc]


class TestLinesFromText:
    def test_keeps_terminators(self) -> None:
        assert lines_from_text("a\nb") == ["a\n", "b"]

    def test_empty_text(self) -> None:
        assert lines_from_text("") == []

    def test_mixed_terminators(self) -> None:
        assert lines_from_text("a\r\nb\rc\n") == ["a\r\n", "b\r", "c\n"]

    def test_form_feed_is_not_a_line_break(self) -> None:
        assert lines_from_text("a\x0cb\n") == ["a\x0cb\n"]
