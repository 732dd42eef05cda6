# SPDX-License-Identifier: MIT
"""Error taxonomy for stylegate."""

from __future__ import annotations

from pathlib import Path


class StylegateError(Exception):
    """Base class for all stylegate errors."""


class ConfigurationError(StylegateError, ValueError):
    """Raised for an invalid option value, before any scanning begins."""


class DuplicateRuleError(StylegateError, ValueError):
    """Raised when a rule id is registered twice."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"Rule already registered: {rule_id!r}")


class UnreadableInputError(StylegateError):
    """Raised when a file cannot be read as text. The file is skipped."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
