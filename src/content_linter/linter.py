"""Lint engine running the enabled rules over Markdown documents."""

import dataclasses
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from common.constants import EXCLUDED_DIRS
from common.env import env
from common.logger import get_logger

from .config import LintConfig
from .models import CheckResult, Violation
from .rules import RULES, rule_table

logger = get_logger(__name__)

# Only CR, LF and CRLF end a line (not \f, \v or Unicode separators)
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class MarkdownLinter:
    """Runs lint rules over Markdown files and strings."""

    def __init__(self, config: LintConfig | None = None, rules: Iterable | None = None):
        """Initialize the linter.

        Args:
            config: Which rules run and at what severity; all rules when None
            rules: Rules to choose from; the built-in rules when None
        """
        self.config = config or LintConfig()
        candidates = tuple(RULES if rules is None else rules)
        rule_table(candidates)  # reject duplicate names up front
        self.rules = [rule for rule in candidates if self.config.is_enabled(rule)]

    def lint_lines(self, lines: list[str], name: str | None = None) -> list[Violation]:
        """Lint one document given as lines.

        Args:
            lines: Lines of the document
            name: Identifier reported as the violations' file_path

        Returns:
            Violations sorted by line, in scan order within a line
        """
        violations: list[Violation] = []
        for rule in self.rules:
            severity = self.config.severity_for(rule)
            for violation in rule.validate(lines, name):
                violations.append(dataclasses.replace(violation, severity=severity))

        violations.sort(key=lambda v: v.line_number)
        logger.debug(f"{name}: {len(violations)} violation(s)")
        return violations

    def lint_string(self, content: str, name: str = "content") -> list[Violation]:
        """Lint Markdown held in memory."""
        return self.lint_lines(_LINE_BREAK_RE.split(content), name)

    def lint_file(self, file_path: Path) -> list[Violation]:
        """Lint one Markdown file.

        Raises:
            OSError: the file cannot be read
            UnicodeDecodeError: the file is not UTF-8
        """
        content = Path(file_path).read_text(encoding="utf-8")
        return self.lint_string(content, str(file_path))

    def lint(
        self,
        files: Iterable[Path | str] = (),
        strings: Mapping[str, str] | None = None,
    ) -> CheckResult:
        """Lint files and in-memory documents.

        Args:
            files: Paths of Markdown files, keyed in the result as given
            strings: Document name to Markdown content

        Returns:
            One entry per document, in the order supplied; clean documents map to []
        """
        result: CheckResult = {}
        for file_path in files:
            result[str(file_path)] = self.lint_file(Path(file_path))
        for name, content in (strings or {}).items():
            result[name] = self.lint_string(content, name)
        return result

    def lint_directory(self, directory: Path) -> CheckResult:
        """Lint every Markdown file under a directory, recursively."""
        return self.lint(find_markdown_files([directory]))


def find_markdown_files(paths: Iterable[Path], exts: tuple[str, ...] | None = None) -> list[Path]:
    """Expand files and directories into the Markdown files to lint.

    Args:
        paths: Files are kept as given; directories are searched recursively
        exts: Extensions to pick up in directories (from the environment when None)

    Returns:
        Files in the order given, each directory's files sorted
    """
    exts = exts or env.markdown_extensions()
    found: list[Path] = []
    for path in paths:
        path = Path(path)
        if not path.is_dir():
            found.append(path)
            continue
        found.extend(
            sorted(
                fp
                for fp in path.rglob("*")
                if fp.is_file()
                and fp.suffix in exts
                and not any(part in EXCLUDED_DIRS for part in fp.relative_to(path).parts)
            )
        )
    return found
