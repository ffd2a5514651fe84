"""Derive anchor ids from heading text."""

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^a-z-]")


def slugify(text: str) -> str:
    """Return the anchor id for a heading's plain text.

    The text is trimmed and lowercased, each space becomes a hyphen, and every
    character outside ``[a-z-]`` is then deleted. Identical headings produce
    identical ids; nothing here tracks ids already handed out.

    Parameters
    ----------
    text : str
        Plain heading text with inline markup already removed.

    Returns
    -------
    str
        Slug made of lowercase ASCII letters and hyphens. May be empty when
        the heading has no ASCII letters at all.

    Examples
    --------
    >>> slugify("Getting Started!")
    'getting-started'
    >>> slugify("  Ünïcode only  ")
    'ncode-only'
    """
    hyphenated = text.strip().lower().replace(" ", "-")
    return _DISALLOWED.sub("", hyphenated)


__all__ = ["slugify"]
