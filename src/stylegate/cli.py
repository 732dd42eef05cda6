# SPDX-License-Identifier: MIT
"""Command-line entry point.

Usage:
    stylegate [options] PATH [PATH ...]

Exit status:
    0 — no violation reaches the profile's fail_on severity
    1 — at least one violation does
    2 — configuration or usage error
    130 — interrupted

Environment variables (overridden by the matching flags):
    STYLEGATE_PROFILE        — gate profile ("default" or "strict")
    STYLEGATE_SOFT_LIMIT     — soft line length limit (default: 80)
    STYLEGATE_HARD_LIMIT     — hard line length limit (default: 120)
    STYLEGATE_INDENT_SIZE    — indentation unit (default: 2)
    STYLEGATE_TAB_WIDTH      — columns per tab (default: 1)
    STYLEGATE_ENABLED_RULES  — comma-separated rule ids (default: all)
    STYLEGATE_WORKERS        — parallel file workers (default: 4)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from stylegate.batch import DEFAULT_EXTENSIONS, iter_source_files, lint_paths
from stylegate.errors import ConfigurationError
from stylegate.report import format_json, format_text
from stylegate.rules import build_rule_set, check_gate, load_config, load_profile
from stylegate.rules.config import PROFILES

log = logging.getLogger(__name__)


def _split_csv(values: list[str] | None) -> list[str] | None:
    if not values:
        return None
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


def _extensions(raw: str) -> tuple[str, ...]:
    return tuple(
        e.strip() if e.strip().startswith(".") else f".{e.strip()}"
        for e in raw.split(",")
        if e.strip()
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stylegate",
        description="Check source files against line-level formatting rules",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Files or directories to check (directories are scanned recursively)",
    )
    parser.add_argument("--config", type=Path, default=None, help="TOML file with stylegate options")
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=None,
        help="Gate profile (overrides STYLEGATE_PROFILE env var)",
    )
    parser.add_argument("--soft-limit", type=int, default=None, help="Soft line length limit")
    parser.add_argument("--hard-limit", type=int, default=None, help="Hard line length limit")
    parser.add_argument("--indent-size", type=int, default=None, help="Indentation unit")
    parser.add_argument("--tab-width", type=int, default=None, help="Columns counted per tab")
    parser.add_argument(
        "--enable",
        action="append",
        default=None,
        metavar="RULE[,RULE...]",
        help="Only run these rules (repeatable)",
    )
    parser.add_argument("--workers", type=int, default=None, help="Parallel file workers")
    parser.add_argument(
        "--extensions",
        default=",".join(DEFAULT_EXTENSIONS),
        help="Comma-separated extensions to scan in directories (default: %(default)s)",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text", dest="output_format")
    parser.add_argument("--list-rules", action="store_true", help="List available rules and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    cli_options = {
        "soft_limit": args.soft_limit,
        "hard_limit": args.hard_limit,
        "indent_size": args.indent_size,
        "tab_width": args.tab_width,
        "enabled_rules": _split_csv(args.enable),
        "workers": args.workers,
    }
    try:
        profile = load_profile(args.profile)
        config = load_config(cli_options, config_path=args.config, search_from=Path.cwd())
        rule_set = build_rule_set(config)
    except ConfigurationError as exc:
        print(f"stylegate: error: {exc}", file=sys.stderr)
        return 2

    if args.list_rules:
        for rule in rule_set:
            print(f"{rule.id} ({rule.default_severity.name.lower()}): {rule.description}")
        return 0

    if not args.paths:
        parser.print_usage(sys.stderr)
        print("stylegate: error: no paths given", file=sys.stderr)
        return 2

    files = list(iter_source_files(args.paths, _extensions(args.extensions)))
    try:
        result = lint_paths(files, rule_set, config)
    except KeyboardInterrupt:
        print("stylegate: interrupted", file=sys.stderr)
        return 130

    for report in result.skipped:
        print(f"stylegate: skipped {report.path}: {report.error}", file=sys.stderr)

    if args.output_format == "json":
        print(format_json(result, profile))
    else:
        print(format_text(result, profile))

    failed = check_gate(result.violations, profile)
    log.info("Gate %s (profile=%s)", "failed" if failed else "passed", profile.name)
    return 1 if failed else 0
