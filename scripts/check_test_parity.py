#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""Test parity check — every source module over MIN_LOC must have a test file.

Usage:
    python scripts/check_test_parity.py
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src" / "stylegate"
TEST_DIR = ROOT / "tests"

SKIP_FILES = {"__init__.py", "__main__.py"}

MIN_LOC = 50

# Module path (relative to SRC_DIR, no suffix) -> test file name, or "skip"
TEST_MAP: dict[str, str] = {
    "rules/base": "skip",
    "rules/context": "test_stylegate_rules_context.py",
    "rules/engine": "test_stylegate_rules_engine.py",
    "rules/config": "test_stylegate_rules_config.py",
    "rules/registry": "test_stylegate_rules_registry.py",
    "rules/line_length": "test_stylegate_rule_line_length.py",
    "rules/comma_spacing": "test_stylegate_rule_comma.py",
    "rules/colon_spacing": "test_stylegate_rule_colon.py",
    "rules/indentation": "test_stylegate_rule_indentation.py",
}


def _count_loc(path: Path) -> int:
    """Count non-blank, non-comment lines."""
    with open(path, encoding="utf-8") as f:
        return sum(1 for line in f if line.strip() and not line.strip().startswith("#"))


def _expected_test(module: str) -> str:
    return TEST_MAP.get(module, f"test_stylegate_{module.replace('/', '_')}.py")


def find_missing() -> list[str]:
    """Return a description of each module lacking its test file."""
    missing: list[str] = []
    for src_file in sorted(SRC_DIR.rglob("*.py")):
        if src_file.name in SKIP_FILES:
            continue
        loc = _count_loc(src_file)
        if loc < MIN_LOC:
            continue
        module = src_file.relative_to(SRC_DIR).with_suffix("").as_posix()
        expected = _expected_test(module)
        if expected == "skip":
            continue
        if not (TEST_DIR / expected).exists():
            missing.append(f"{module}.py ({loc} LOC) -> missing {expected}")
    return missing


def main() -> None:
    missing = find_missing()
    if not missing:
        print("All source modules have test files.")
        sys.exit(0)
    print(f"Missing test files ({len(missing)}):")
    for entry in missing:
        print(f"  {entry}")
    sys.exit(1)


if __name__ == "__main__":
    main()
