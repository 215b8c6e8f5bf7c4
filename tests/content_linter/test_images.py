"""Tests for finding image references in Markdown source."""

from content_linter.images import collect_definitions, iter_image_references
from content_linter.models import ImageReference


def _refs(text: str) -> list[tuple[int, str, str]]:
    return [(r.line, r.path, r.kind) for r in iter_image_references(text.split("\n"))]


def test_finds_inline_images_with_line_numbers():
    """Test that inline images are reported with their 1-based line."""
    text = "# Title\n\n![alt](images/one.png)\ntext ![b](two.png \"Title\") more"

    assert _refs(text) == [
        (3, "images/one.png", "inline"),
        (4, "two.png", "inline"),
    ]


def test_reference_carries_alt_text():
    """Test the full record produced for an inline image."""
    refs = list(iter_image_references(["![A diagram](d.png)"]))

    assert refs == [ImageReference(path="d.png", line=1, alt="A diagram", kind="inline")]


def test_angle_bracket_destination_is_unwrapped():
    """Test that <...> destinations keep spaces but lose the brackets."""
    assert _refs("![x](<my image.png> 'title')") == [(1, "my image.png", "inline")]


def test_multiple_images_on_one_line_in_order():
    """Test left to right order within a line."""
    text = "![a](a.png)![b](b.png) [![badge](c.svg)](https://example.com)"

    assert [path for _, path, _ in _refs(text)] == ["a.png", "b.png", "c.svg"]


def test_resolves_reference_images():
    """Test full, collapsed and shortcut reference images."""
    text = "\n".join(
        [
            "![Full][Logo]",
            "![logo][]",
            "![LOGO]",
            "",
            "[logo]: /images/Logo_Dark.png \"Logo\"",
        ]
    )

    assert _refs(text) == [
        (1, "/images/Logo_Dark.png", "reference"),
        (2, "/images/Logo_Dark.png", "reference"),
        (3, "/images/Logo_Dark.png", "reference"),
    ]


def test_undefined_reference_is_not_an_image():
    """Test that a reference without definition is plain text."""
    assert _refs("![nothing here][missing]\n![also nothing]") == []


def test_definitions_are_normalized_and_first_wins():
    """Test label matching ignores case and extra whitespace."""
    lines = [
        "[My   Label]: <images/first file.png>",
        "[my label]: images/second.png",
    ]

    assert collect_definitions(lines) == {"my label": "images/first file.png"}


def test_skips_fenced_code_blocks():
    """Test that images inside ``` and ~~~ fences are ignored."""
    text = "\n".join(
        [
            "```markdown",
            "![no](Bad_One.png)",
            "```",
            "~~~~",
            "![no](Bad_Two.png)",
            "~~~",
            "still in the tilde fence ![no](Bad_Three.png)",
            "~~~~",
            "![yes](after-fence.png)",
        ]
    )

    assert _refs(text) == [(9, "after-fence.png", "inline")]


def test_skips_inline_code_spans():
    """Test that images inside backticks are ignored."""
    text = "`![no](Bad.png)` but ![yes](good.png) and ``![no](Also_Bad.png)``"

    assert _refs(text) == [(1, "good.png", "inline")]


def test_skips_html_comments():
    """Test that images inside single- and multi-line comments are ignored."""
    text = "\n".join(
        [
            "<!-- ![no](Bad.png) --> ![yes](one.png)",
            "<!--",
            "![no](Also_Bad.png)",
            "-->",
            "![yes](two.png)",
        ]
    )

    assert _refs(text) == [(1, "one.png", "inline"), (5, "two.png", "inline")]


def test_skips_escaped_images():
    """Test that \\![...] is literal text."""
    assert _refs(r"\![no](Bad.png)") == []


def test_plain_links_are_not_images():
    """Test that [text](url) is not reported."""
    assert _refs("[Some_Link](Some_Page.md)") == []


def test_empty_destination_is_reported():
    """Test that ![alt]() yields an image with an empty path."""
    assert _refs("![alt]()") == [(1, "", "inline")]


def test_destination_with_balanced_parentheses():
    """Test that one level of parentheses stays part of the destination."""
    text = '![x](My_Image(1).png)\n![y](images/copy(2).png "Title")'

    assert _refs(text) == [
        (1, "My_Image(1).png", "inline"),
        (2, "images/copy(2).png", "inline"),
    ]


def test_escaped_backslash_before_image():
    """Test that an even run of backslashes leaves the image unescaped."""
    assert _refs(r"\\![yes](Bad.png)") == [(1, "Bad.png", "inline")]
    assert _refs(r"\\\![no](Bad.png)") == []
