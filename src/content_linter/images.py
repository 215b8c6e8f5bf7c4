"""Find image references in Markdown source.

This is a line scanner, not a Markdown parser: it knows just enough of the
syntax to find the images a renderer would produce. Images inside fenced
code blocks, inline code spans and HTML comments are not reported.
"""

import re
from collections.abc import Iterator

from .models import ImageReference

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")
_DEFINITION_RE = re.compile(
    r"^ {0,3}\[(?P<label>[^\]]+)\]:[ \t]*(?P<dest><[^>]*>|\S+)"
)
_CODE_SPAN_RE = re.compile(r"(?<!`)(`+)(?!`).+?(?<!`)\1(?!`)")

# ![alt](dest "title") | ![alt][label] | ![alt][] | ![alt]
_IMAGE_RE = re.compile(
    r"!\[(?P<alt>[^\]]*)\]"
    r"(?:"
    r"\(\s*(?P<dest><[^>]*>|(?:[^\s()]|\([^\s()]*\))*)"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
    r"|\[(?P<label>[^\]]*)\]"
    r")?"
)


def _normalize_label(label: str) -> str:
    return " ".join(label.split()).casefold()


def _unwrap(dest: str) -> str:
    if dest.startswith("<") and dest.endswith(">"):
        return dest[1:-1].strip()
    return dest


def _blank(match: re.Match) -> str:
    return " " * len(match.group(0))


class _Masker:
    """Blanks out the parts of each line that cannot contain images."""

    def __init__(self):
        self.fence: str | None = None
        self.in_comment = False

    def mask(self, line: str) -> str:
        fence_match = _FENCE_RE.match(line)
        if self.fence is not None:
            # Closing fence: same character, at least as long, nothing after it
            if (
                fence_match
                and fence_match.group("fence")[0] == self.fence[0]
                and len(fence_match.group("fence")) >= len(self.fence)
                and not line[fence_match.end() :].strip()
            ):
                self.fence = None
            return ""
        if fence_match and not self.in_comment:
            self.fence = fence_match.group("fence")
            return ""

        line = self._mask_comments(line)
        return _CODE_SPAN_RE.sub(_blank, line)

    def _mask_comments(self, line: str) -> str:
        out = []
        pos = 0
        while pos < len(line):
            if self.in_comment:
                end = line.find("-->", pos)
                if end == -1:
                    out.append(" " * (len(line) - pos))
                    pos = len(line)
                else:
                    out.append(" " * (end + 3 - pos))
                    pos = end + 3
                    self.in_comment = False
            else:
                start = line.find("<!--", pos)
                if start == -1:
                    out.append(line[pos:])
                    pos = len(line)
                else:
                    out.append(line[pos:start])
                    pos = start
                    self.in_comment = True
        return "".join(out)


def _masked_lines(lines: list[str]) -> list[str]:
    masker = _Masker()
    return [masker.mask(line) for line in lines]


def collect_definitions(lines: list[str]) -> dict[str, str]:
    """Collect link reference definitions (``[label]: dest``).

    Args:
        lines: Lines of the Markdown document

    Returns:
        Mapping of normalized label to destination; the first definition wins
    """
    definitions: dict[str, str] = {}
    for line in _masked_lines(lines):
        match = _DEFINITION_RE.match(line)
        if match:
            definitions.setdefault(
                _normalize_label(match.group("label")), _unwrap(match.group("dest"))
            )
    return definitions


def iter_image_references(lines: list[str]) -> Iterator[ImageReference]:
    """Yield image references in document order.

    Args:
        lines: Lines of the Markdown document

    Yields:
        ImageReference for every inline image and every reference image
        whose label has a definition
    """
    masked = _masked_lines(lines)
    definitions = None

    for line_num, line in enumerate(masked, start=1):
        if "![" not in line:
            continue
        for match in _IMAGE_RE.finditer(line):
            # An odd run of backslashes escapes the "!"; an even run is literal backslashes
            prefix = line[: match.start()]
            if (len(prefix) - len(prefix.rstrip("\\"))) % 2 == 1:
                continue

            alt = match.group("alt")
            if match.group("dest") is not None:
                yield ImageReference(
                    path=_unwrap(match.group("dest")), line=line_num, alt=alt, kind="inline"
                )
                continue

            if definitions is None:
                definitions = collect_definitions(lines)
            label = match.group("label") or alt
            dest = definitions.get(_normalize_label(label))
            if dest is not None:
                yield ImageReference(path=dest, line=line_num, alt=alt, kind="reference")
