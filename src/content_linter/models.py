"""Data models for image references, violations and lint results."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum


class IssueSeverity(Enum):
    """Severity levels for lint violations."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ImageReference:
    """One image found while scanning a document."""

    path: str  # The src as written in the document
    line: int  # 1-based line of the "![" opener
    alt: str = ""
    kind: str = "inline"  # "inline" or "reference"


@dataclass(frozen=True)
class Violation:
    """A single lint rule violation."""

    rule_id: str  # e.g., "MD115"
    line_number: int
    message: str
    rule_names: tuple[str, ...] = ()
    severity: IssueSeverity = IssueSeverity.ERROR
    file_path: str | None = None
    context: str = ""  # The offending value, e.g. the image path
    suggestion: str | None = None

    @property
    def line(self) -> int:
        return self.line_number

    @property
    def rule_label(self) -> str:
        """Rule names joined the way lint output shows them ("MD115/image-file-kebab")."""
        return "/".join(self.rule_names) if self.rule_names else self.rule_id


# Document identifier -> violations in line order. Clean documents map to [].
CheckResult = dict[str, list[Violation]]


def summarize(result: CheckResult) -> dict[str, int]:
    """Count documents and violations in a lint result.

    Args:
        result: Lint result to summarize

    Returns:
        Dict with document totals and one count per severity
    """
    by_severity = Counter(v.severity for violations in result.values() for v in violations)
    summary = {
        "documents": len(result),
        "documents_with_violations": sum(1 for violations in result.values() if violations),
        "violations": sum(by_severity.values()),
    }
    for severity in IssueSeverity:
        summary[severity.value] = by_severity.get(severity, 0)
    return summary
