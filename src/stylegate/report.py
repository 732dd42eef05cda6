# SPDX-License-Identifier: MIT
"""Report rendering — plain text for terminals, JSON for tooling."""

from __future__ import annotations

import navi_sanitize
from pydantic import BaseModel

from stylegate.batch import BatchResult
from stylegate.rules.base import RuleSeverity, Violation
from stylegate.rules.config import ProfileConfig
from stylegate.rules.engine import check_gate


class ViolationRecord(BaseModel):
    rule_id: str
    line: int
    column: int | None
    severity: str
    kind: str
    message: str
    suggestion: str | None = None


class FileRecord(BaseModel):
    path: str
    violations: list[ViolationRecord]
    error: str | None = None


class Summary(BaseModel):
    files_checked: int
    files_skipped: int
    files_cancelled: int
    errors: int
    warnings: int


class LintReport(BaseModel):
    """Serializable view of a batch run."""

    profile: str
    passed: bool
    summary: Summary
    files: list[FileRecord]
    cancelled: list[str]


def _record(v: Violation) -> ViolationRecord:
    return ViolationRecord(
        rule_id=v.rule_id,
        line=v.line,
        column=v.column,
        severity=v.severity.name.lower(),
        kind=str(v.kind),
        message=v.message,
        suggestion=v.suggestion,
    )


def build_report(result: BatchResult, profile: ProfileConfig) -> LintReport:
    violations = result.violations
    return LintReport(
        profile=profile.name,
        passed=not check_gate(violations, profile),
        summary=Summary(
            files_checked=result.files_checked,
            files_skipped=len(result.skipped),
            files_cancelled=len(result.cancelled),
            errors=sum(1 for v in violations if v.severity == RuleSeverity.ERROR),
            warnings=sum(1 for v in violations if v.severity == RuleSeverity.WARNING),
        ),
        files=[
            FileRecord(
                path=r.path,
                violations=[_record(v) for v in r.violations],
                error=r.error,
            )
            for r in result.reports
        ],
        cancelled=list(result.cancelled),
    )


def format_json(result: BatchResult, profile: ProfileConfig) -> str:
    return build_report(result, profile).model_dump_json(indent=2)


def _clean(text: str) -> str:
    """Strip invisible and bidi control characters before writing to a terminal."""
    return navi_sanitize.clean(text)


def format_violation(path: str, v: Violation) -> str:
    location = f"{_clean(path)}:{v.line}"
    if v.column is not None:
        location += f":{v.column}"
    line = f"{location}: {v.severity.name.lower()} [{v.rule_id}] {_clean(v.message)}"
    if v.suggestion:
        line += f" ({_clean(v.suggestion)})"
    return line


def format_text(result: BatchResult, profile: ProfileConfig) -> str:
    """One line per violation or skipped file, then a summary line."""
    report = build_report(result, profile)
    lines: list[str] = []
    for r in result.reports:
        if r.error is not None:
            lines.append(f"{_clean(r.path)}: skipped ({_clean(r.error)})")
            continue
        lines.extend(format_violation(r.path, v) for v in r.violations)
    for path in result.cancelled:
        lines.append(f"{_clean(path)}: cancelled")

    s = report.summary
    status = "passed" if report.passed else "failed"
    lines.append(
        f"{s.errors} error(s), {s.warnings} warning(s) in {s.files_checked} file(s)"
        f" [{report.profile}: {status}]"
    )
    return "\n".join(lines)
