"""Image file names must be lowercase kebab case (MD115)."""

import dataclasses
import re

from common.constants import IMAGE_FILE_KEBAB_ALIAS, IMAGE_FILE_KEBAB_RULE_ID

from ..errors import PreconditionViolation
from ..images import iter_image_references
from ..models import Violation

MESSAGE = "Image file names should be lowercase kebab case"

_KEBAB_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_QUERY_OR_FRAGMENT_RE = re.compile(r"[?#]")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS_RE = re.compile(r"[^A-Za-z0-9]+")


def _file_name(path: str) -> str:
    path = path.strip()
    if path.startswith("<") and path.endswith(">"):
        path = path[1:-1]
    path = _QUERY_OR_FRAGMENT_RE.split(path, maxsplit=1)[0]
    return path.replace("\\", "/").split("/")[-1]


def image_file_stem(path: str) -> str:
    """Return the file name of an image path without directories or extension.

    Everything from the first dot on counts as the extension, so
    "/img/hero.v2.png" gives "hero".
    """
    return _file_name(path).split(".")[0]


def is_kebab_case(name: str) -> bool:
    """Check that name is lowercase ASCII words/digits joined by single hyphens."""
    return _KEBAB_RE.fullmatch(name) is not None


def suggest_kebab_case(name: str) -> str:
    """Best-effort kebab-case spelling of name ("MyCoolImage" -> "my-cool-image")."""
    name = _CAMEL_BOUNDARY_RE.sub("-", name)
    return _SEPARATORS_RE.sub("-", name).strip("-").lower()


def _suggested_file_name(path: str, stem: str) -> str | None:
    suggested = suggest_kebab_case(stem)
    if not suggested:
        return None
    return suggested + _file_name(path)[len(stem) :]


def check_image_reference(path: str, line: int) -> Violation | None:
    """Check one image path.

    Args:
        path: Image source as written in the document
        line: 1-based line the image appears on

    Returns:
        A Violation when the file name is not lowercase kebab case, else None

    Raises:
        PreconditionViolation: path is not a string or line is not a positive int
    """
    if not isinstance(path, str):
        raise PreconditionViolation(f"path must be a string, got {type(path).__name__}")
    if isinstance(line, bool) or not isinstance(line, int) or line < 1:
        raise PreconditionViolation(f"line must be a positive integer, got {line!r}")

    stem = image_file_stem(path)
    if is_kebab_case(stem):
        return None

    return Violation(
        rule_id=IMAGE_FILE_KEBAB_RULE_ID,
        line_number=line,
        message=MESSAGE,
        rule_names=ImageFileKebabRule.names,
        context=path,
        suggestion=_suggested_file_name(path, stem),
    )


class ImageFileKebabRule:
    """Flags images whose file name is not lowercase kebab case."""

    names = (IMAGE_FILE_KEBAB_RULE_ID, IMAGE_FILE_KEBAB_ALIAS)
    description = MESSAGE
    tags = ("images",)

    def validate(self, lines: list[str], file_path: str | None = None) -> list[Violation]:
        """Check every image in a document.

        Args:
            lines: Lines of the Markdown document
            file_path: Identifier of the document being linted

        Returns:
            Violations in document order
        """
        violations = []
        for ref in iter_image_references(lines):
            violation = check_image_reference(ref.path, ref.line)
            if violation is not None:
                violations.append(dataclasses.replace(violation, file_path=file_path))
        return violations
