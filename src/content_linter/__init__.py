"""Lint Markdown content for style problems."""

from .config import LintConfig
from .errors import ConfigError, ContentLinterError, PreconditionViolation, UnknownRuleError
from .linter import MarkdownLinter
from .models import CheckResult, ImageReference, IssueSeverity, Violation
from .rules.image_file_kebab import ImageFileKebabRule, check_image_reference

__all__ = [
    "CheckResult",
    "ConfigError",
    "ContentLinterError",
    "ImageFileKebabRule",
    "ImageReference",
    "IssueSeverity",
    "LintConfig",
    "MarkdownLinter",
    "PreconditionViolation",
    "UnknownRuleError",
    "Violation",
    "check_image_reference",
]
