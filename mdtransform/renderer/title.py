"""Recognise the ``TITLE:`` heading directive and build its title block."""

from __future__ import annotations

from markdown_it.common.utils import escapeHtml

TITLE_PREFIX = "TITLE: "
TITLE_LEVEL = 1

TITLE_BLOCK_TEMPLATE = (
    "<title>{title}</title>\n"
    '<div class="page-title" style="text-align: center;">\n'
    '<h1 style="font-size: 2.4em; margin-bottom: 0.3em;">{title}</h1>\n'
    "<hr />\n"
    "</div>\n"
)


def match_title(level: int, text: str) -> str | None:
    """Return the page title when ``text`` carries the title directive.

    Only first-level headings qualify, and the prefix is matched exactly,
    trailing space included.

    >>> match_title(1, "TITLE: Welcome")
    'Welcome'
    >>> match_title(2, "TITLE: Welcome") is None
    True
    >>> match_title(1, "Title: Welcome") is None
    True
    """
    if level != TITLE_LEVEL or not text.startswith(TITLE_PREFIX):
        return None
    return text[len(TITLE_PREFIX) :]


def title_block(title: str) -> str:
    """Render the raw HTML that replaces a title-directive heading.

    The fragment opens with a ``<title>`` element and follows it with a
    centred block holding a styled heading and a horizontal rule. It carries
    no ``id`` attribute.
    """
    return TITLE_BLOCK_TEMPLATE.format(title=escapeHtml(title))


__all__ = ["TITLE_PREFIX", "match_title", "title_block"]
