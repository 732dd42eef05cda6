# SPDX-License-Identifier: MIT
"""Line scanner — shallow lexical facts for each input line."""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache

# Binary operator tokens located by the scanner. Multi-character tokens win
# over their prefixes, so ``::`` and ``:=`` are operators, not colons.
DEFAULT_OPERATORS: tuple[str, ...] = (
    "==",
    "!=",
    "<=",
    ">=",
    "=>",
    "->",
    "<-",
    "&&",
    "||",
    "::",
    ":=",
    "+",
    "-",
    "*",
    "/",
    "%",
    "=",
    "<",
    ">",
)

_LINE_TERMINATORS = ("\r\n", "\n", "\r")


@dataclass(frozen=True)
class LineFact:
    """Lexical measurements for one line.

    Offsets in ``commas``, ``colons`` and ``operators`` are 0-based character
    indices into ``text``. ``length`` and ``indent`` are in columns.
    """

    number: int
    text: str
    length: int
    indent: int
    commas: tuple[int, ...] = ()
    colons: tuple[int, ...] = ()
    operators: tuple[tuple[int, str], ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    def single_space_after(self, offset: int) -> bool:
        """Check that exactly one space follows the character at *offset*."""
        rest = self.text[offset + 1 : offset + 3]
        return rest[:1] == " " and rest[1:2] != " "


def _strip_terminator(raw: str) -> str:
    for term in _LINE_TERMINATORS:
        if raw.endswith(term):
            return raw[: -len(term)]
    return raw


def _columns(text: str, tab_width: int) -> int:
    return len(text) + text.count("\t") * (tab_width - 1)


def _leading_whitespace(text: str, tab_width: int) -> int:
    width = 0
    for ch in text:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += tab_width
        else:
            break
    return width


@lru_cache(maxsize=32)
def _longest_first(operators: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(sorted(operators, key=len, reverse=True))


def _locate_tokens(
    text: str, operators: tuple[str, ...]
) -> tuple[tuple[int, ...], tuple[int, ...], tuple[tuple[int, str], ...]]:
    """Single left-to-right scan for commas, colons and operator tokens."""
    ordered_ops = _longest_first(operators)
    commas: list[int] = []
    colons: list[int] = []
    ops: list[tuple[int, str]] = []

    i = 0
    n = len(text)
    while i < n:
        match = next((op for op in ordered_ops if text.startswith(op, i)), None)
        if match is not None:
            ops.append((i, match))
            i += len(match)
            continue
        ch = text[i]
        if ch == ",":
            commas.append(i)
        elif ch == ":":
            colons.append(i)
        i += 1
    return tuple(commas), tuple(colons), tuple(ops)


def scan_line(
    number: int,
    raw: str,
    *,
    tab_width: int = 1,
    operators: tuple[str, ...] = DEFAULT_OPERATORS,
) -> LineFact:
    """Build the LineFact for a single raw line (terminator optional)."""
    text = _strip_terminator(raw)
    if not text:
        return LineFact(number=number, text="", length=0, indent=0)
    commas, colons, ops = _locate_tokens(text, operators)
    return LineFact(
        number=number,
        text=text,
        length=_columns(text, tab_width),
        indent=_leading_whitespace(text, tab_width),
        commas=commas,
        colons=colons,
        operators=ops,
    )


def scan(
    lines: Iterable[str],
    *,
    tab_width: int = 1,
    operators: tuple[str, ...] = DEFAULT_OPERATORS,
) -> Iterator[LineFact]:
    """Lazily yield one LineFact per input line, in input order.

    Line numbers start at 1. The input is never mutated.
    """
    for number, raw in enumerate(lines, start=1):
        yield scan_line(number, raw, tab_width=tab_width, operators=operators)


def lines_from_text(text: str) -> list[str]:
    """Split a text blob into lines, keeping terminators.

    Only \\n, \\r\\n and \\r end a line. A final line without a trailing
    newline is kept; an empty blob has no lines.
    """
    return io.StringIO(text, newline="").readlines()
