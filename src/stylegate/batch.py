# SPDX-License-Identifier: MIT
"""Batch runner — reads files and lints them in parallel, one pipeline per file.

Each file is read, scanned and evaluated on a worker thread. The RuleSet is
shared read-only; everything else belongs to the task handling that file.
An unreadable file is reported and skipped; the batch carries on.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from stylegate.errors import UnreadableInputError
from stylegate.rules.base import Violation
from stylegate.rules.config import LintConfig
from stylegate.rules.context import lines_from_text
from stylegate.rules.engine import RuleEngine
from stylegate.rules.registry import RuleSet

log = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".scala", ".sc")

DEFAULT_EXCLUDE_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".bsp",
        ".idea",
        ".metals",
        ".bloop",
        ".venv",
        "venv",
        "__pycache__",
        "node_modules",
        "target",
        "dist",
        "build",
    }
)


@dataclass(frozen=True)
class FileReport:
    """Violations for one file, or the reason it was skipped."""

    path: str
    violations: tuple[Violation, ...] = ()
    error: str | None = None

    @property
    def skipped(self) -> bool:
        return self.error is not None


@dataclass
class BatchResult:
    """Per-file reports in input order, plus paths never started due to cancellation."""

    reports: list[FileReport] = field(default_factory=list)
    cancelled: list[str] = field(default_factory=list)

    @property
    def violations(self) -> list[Violation]:
        return [v for r in self.reports for v in r.violations]

    @property
    def skipped(self) -> list[FileReport]:
        return [r for r in self.reports if r.skipped]

    @property
    def files_checked(self) -> int:
        return sum(1 for r in self.reports if not r.skipped)


def read_lines(path: Path) -> list[str]:
    """Read *path* as UTF-8 text and split it into lines.

    Raises:
        UnreadableInputError: If the file cannot be opened, contains NUL bytes,
            or is not valid UTF-8.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise UnreadableInputError(path, e.strerror or type(e).__name__) from e
    if b"\x00" in data:
        raise UnreadableInputError(path, "binary content")
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnreadableInputError(path, f"not valid UTF-8 (byte {e.start})") from e
    return lines_from_text(text)


def iter_source_files(
    paths: Iterable[Path],
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
) -> Iterator[Path]:
    """Expand directories recursively into matching files, in sorted order.

    Paths that are not directories are yielded as given, whatever their suffix.
    """
    for p in paths:
        if not p.is_dir():
            yield p
            continue
        for fp in sorted(p.rglob("*")):
            if not fp.is_file() or fp.suffix not in extensions:
                continue
            if any(part in DEFAULT_EXCLUDE_DIRS for part in fp.relative_to(p).parts):
                continue
            yield fp


def lint_file(path: Path, engine: RuleEngine) -> FileReport:
    """Read, scan and evaluate a single file."""
    try:
        lines = read_lines(path)
    except UnreadableInputError as e:
        log.warning("Skipping unreadable file %s: %s", e.path, e.reason)
        return FileReport(path=str(path), error=e.reason)
    violations = engine.run(lines)
    log.debug("%s: %d line(s), %d violation(s)", path, len(lines), len(violations))
    return FileReport(path=str(path), violations=tuple(violations))


def lint_paths(
    paths: Iterable[Path],
    rule_set: RuleSet,
    config: LintConfig,
    *,
    cancel: threading.Event | None = None,
) -> BatchResult:
    """Lint files on a pool of ``config.workers`` threads.

    Setting *cancel* stops files that have not started yet; a file already
    being processed runs to completion. Reports keep the input order.
    """
    files = list(paths)
    engine = RuleEngine(rule_set, config)
    stop = cancel if cancel is not None else threading.Event()
    log.info("Linting %d file(s) with %d worker(s)", len(files), config.workers)

    def _task(path: Path) -> FileReport | None:
        if stop.is_set():
            return None
        return lint_file(path, engine)

    with ThreadPoolExecutor(max_workers=config.workers) as pool:
        try:
            outcomes = list(pool.map(_task, files))
        except KeyboardInterrupt:
            stop.set()
            raise

    result = BatchResult()
    for path, report in zip(files, outcomes, strict=True):
        if report is None:
            result.cancelled.append(str(path))
        else:
            result.reports.append(report)

    log.info(
        "Checked %d file(s): %d violation(s), %d skipped, %d cancelled",
        result.files_checked,
        len(result.violations),
        len(result.skipped),
        len(result.cancelled),
    )
    return result
