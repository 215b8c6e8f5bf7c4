"""Lint result reporters."""

import json

from rich.markup import escape

from common.logger import get_logger

from .models import CheckResult, IssueSeverity, summarize

logger = get_logger(__name__)

_ICONS = {
    IssueSeverity.ERROR: "[red]✗[/red]",
    IssueSeverity.WARNING: "[yellow]⚠[/yellow]",
    IssueSeverity.INFO: "ℹ",
}


class ViolationReporter:
    """Format and display lint results."""

    def __init__(self, show_info: bool = True):
        """Initialize the reporter.

        Args:
            show_info: Whether to show info-level violations
        """
        self.show_info = show_info

    def report_console(self, result: CheckResult) -> int:
        """Log lint results to the console.

        Args:
            result: Lint result to report

        Returns:
            Exit code (0 for success, 1 if errors found)
        """
        for document, violations in result.items():
            if not violations:
                continue

            logger.info(f"\n{escape(document)}:")
            for v in violations:
                if not self.show_info and v.severity == IssueSeverity.INFO:
                    continue
                logger.info(
                    f"  {_ICONS[v.severity]} Line [bold]{v.line_number}[/bold]: "
                    f"{escape(v.rule_label)} {escape(v.message)}"
                )
                if v.context:
                    logger.info(f"      {escape(v.context)}")
                if v.suggestion:
                    logger.info(f"      Suggestion: {escape(v.suggestion)}")

        summary = summarize(result)
        logger.info("\n" + "=" * 60)
        logger.info(
            f"Checked {summary['documents']} file(s): "
            f"[bold]{summary['error']}[/bold] errors, "
            f"[bold]{summary['warning']}[/bold] warnings, "
            f"[bold]{summary['info']}[/bold] info"
        )

        return 1 if summary["error"] > 0 else 0

    def report_json(self, result: CheckResult) -> str:
        """Format results as JSON, leaving out clean documents.

        Args:
            result: Lint result to report

        Returns:
            JSON string representation of results
        """
        data = {
            "files": [
                {
                    "file": document,
                    "issues": [
                        {
                            "line": v.line_number,
                            "severity": v.severity.value,
                            "rule_id": v.rule_id,
                            "rule_names": list(v.rule_names),
                            "message": v.message,
                            "context": v.context,
                            "suggestion": v.suggestion,
                        }
                        for v in violations
                    ],
                }
                for document, violations in result.items()
                if violations
            ]
        }

        return json.dumps(data, indent=2)
