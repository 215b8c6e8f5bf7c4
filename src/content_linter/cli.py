#!/usr/bin/env python3
"""CLI interface for content_linter."""

import argparse
from pathlib import Path

from rich.markup import escape

from common.logger import error, get_logger, setup_logging, success

from .config import LintConfig
from .errors import ConfigError
from .linter import MarkdownLinter, find_markdown_files
from .models import summarize
from .reporters import ViolationReporter
from .rules import RULES, get_rule

logger = get_logger(__name__)


def _load_config(args) -> LintConfig:
    if args.rule:
        rule = get_rule(args.rule)
        return LintConfig.only(rule.names[0])
    if args.config:
        return LintConfig.load(Path(args.config))
    return LintConfig.from_env()


def cmd_check(args):
    """Lint Markdown files and directories.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    paths = [Path(p) for p in args.paths]
    missing = [p for p in paths if not p.exists()]
    if missing:
        for path in missing:
            error(f"Path '{escape(str(path))}' does not exist")
        return 1

    try:
        linter = MarkdownLinter(config=_load_config(args))
        result = linter.lint(find_markdown_files(paths))
    except ConfigError as e:
        error(escape(str(e)))
        return 1
    except (OSError, UnicodeDecodeError) as e:
        error(f"Cannot read input: {escape(str(e))}")
        return 1

    reporter = ViolationReporter(show_info=args.show_info)

    if args.format == "json":
        output = reporter.report_json(result)
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(output, encoding="utf-8")
            success(f"Lint results written to {output_path}")
        else:
            print(output)
        return 1 if summarize(result)["error"] > 0 else 0

    exit_code = reporter.report_console(result)
    if args.output:
        Path(args.output).write_text(reporter.report_json(result), encoding="utf-8")
        success(f"Lint results also written to {args.output}")
    return exit_code


def cmd_rules(args):
    """List the built-in rules.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    for rule in RULES:
        logger.info(f"[bold]{'/'.join(rule.names)}[/bold] ({', '.join(rule.tags)})")
        logger.info(f"    {rule.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="content-linter", description="Lint Markdown content"
    )
    parser.add_argument("--log-file", type=str, help="Also write log output to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Lint Markdown files")
    check_parser.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to lint (directories are searched recursively)",
    )
    check_parser.add_argument(
        "--config", type=str, help="Path to a JSON lint config (default: $CONTENT_LINTER_CONFIG)"
    )
    check_parser.add_argument(
        "--rule", type=str, help="Run only this rule (name or alias, e.g. MD115)"
    )
    check_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    check_parser.add_argument(
        "--output",
        type=str,
        help="Write JSON lint results to file (in addition to console for console format)",
    )
    check_parser.add_argument(
        "--hide-info",
        dest="show_info",
        action="store_false",
        help="Hide info-level violations",
    )
    check_parser.set_defaults(func=cmd_check)

    rules_parser = subparsers.add_parser("rules", help="List available rules")
    rules_parser.set_defaults(func=cmd_rules)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
