"""Markdown-to-HTML rendering: heading anchors, title blocks and templates."""

from .headings import HeadingRewriter, rewrite_headings
from .markdown import MarkdownRenderer, render
from .slug import slugify
from .template import TemplateError, compose, require_placeholder
from .title import TITLE_PREFIX, match_title, title_block

__all__ = [
    "TITLE_PREFIX",
    "HeadingRewriter",
    "MarkdownRenderer",
    "TemplateError",
    "compose",
    "match_title",
    "render",
    "require_placeholder",
    "rewrite_headings",
    "slugify",
    "title_block",
]
