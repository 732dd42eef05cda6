# SPDX-License-Identifier: MIT
"""stylegate — line-level style checker for formatting conventions."""

from stylegate.batch import BatchResult, FileReport, iter_source_files, lint_paths, read_lines
from stylegate.errors import (
    ConfigurationError,
    DuplicateRuleError,
    StylegateError,
    UnreadableInputError,
)
from stylegate.report import build_report, format_json, format_text
from stylegate.rules import (
    LineFact,
    LintConfig,
    RuleSet,
    RuleSeverity,
    Violation,
    build_rule_set,
    evaluate,
    lint_lines,
    scan,
)

__all__ = [
    "BatchResult",
    "ConfigurationError",
    "DuplicateRuleError",
    "FileReport",
    "LineFact",
    "LintConfig",
    "RuleSet",
    "RuleSeverity",
    "StylegateError",
    "UnreadableInputError",
    "Violation",
    "build_report",
    "build_rule_set",
    "evaluate",
    "format_json",
    "format_text",
    "iter_source_files",
    "lint_lines",
    "lint_paths",
    "read_lines",
    "scan",
]
