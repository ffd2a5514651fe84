"""Unit tests for heading slug derivation."""

from __future__ import annotations

import pytest

from mdtransform.renderer.slug import slugify


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello World", "hello-world"),
        ("Getting Started!", "getting-started"),
        ("  padded heading  ", "padded-heading"),
        ("Version 2.0 Notes", "version--notes"),
        ("snake_case and-kebab", "snakecase-and-kebab"),
        ("Café au lait", "caf-au-lait"),
        ("TITLE: Nope", "title-nope"),
        ("", ""),
        ("123 !!!", "-"),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    """Slugs keep only lowercase ASCII letters and hyphens."""
    actual = slugify(text)
    assert actual == expected, f"slugify({text!r}) returned {actual!r}"


def test_slugify_is_deterministic() -> None:
    """The same heading text always yields the same slug."""
    assert slugify("Same Heading") == slugify("Same Heading") == "same-heading"


def test_tabs_are_not_turned_into_hyphens() -> None:
    """Only space characters become hyphens; other whitespace is dropped."""
    assert slugify("tab\tseparated") == "tabseparated"
