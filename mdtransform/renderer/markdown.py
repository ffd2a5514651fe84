"""Render Markdown into HTML with anchored headings and optional highlighting."""

from __future__ import annotations

import functools
from html import escape

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from mdtransform._constants import DEFAULT_TEMPLATE

from .headings import rewrite_headings
from .template import compose

CODEHILITE_CLASS = "codehilite"


def build_parser(options: dict[str, object] | None = None) -> MarkdownIt:
    """Return a CommonMark parser with tables, footnotes, strikethrough and task lists."""
    return (
        MarkdownIt("commonmark", options or {})
        .enable(["table", "strikethrough"])
        .use(footnote_plugin)
        .use(tasklists_plugin)
    )


class MarkdownRenderer:
    """Render Markdown bodies and full documents.

    A renderer is safe to share between threads: markdown-it-py keeps parse
    state per call, and each call rewrites headings with its own state.
    """

    def __init__(self, pygments_style: str | None = None) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used to highlight fenced code. ``None`` (the
            default) leaves code blocks as plain ``<pre><code>``.

        Raises
        ------
        ValueError
            If ``pygments_style`` does not name an installed Pygments style.
        """
        self.pygments_style = pygments_style
        self._formatter: HtmlFormatter | None = None
        options: dict[str, object] = {}
        if pygments_style:
            try:
                self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)
            except ClassNotFound as exc:
                msg = f"Unknown Pygments style '{pygments_style}'."
                raise ValueError(msg) from exc
            options["highlight"] = self._highlight
        self.md = build_parser(options)

    @property
    def stylesheet(self) -> str:
        """Return the CSS for highlighted code, or an empty string."""
        if self._formatter is None:
            return ""
        return self._formatter.get_style_defs(f".{CODEHILITE_CLASS}")

    def body(self, text: str) -> str:
        """Render ``text`` into an HTML body fragment.

        When highlighting is enabled and the text has fenced code, the
        fragment starts with a ``<style>`` element holding :attr:`stylesheet`.
        """
        env: dict[str, object] = {}
        tokens = rewrite_headings(self.md.parse(text, env))
        html = self.md.renderer.render(tokens, self.md.options, env)
        if self._formatter is not None and f'<pre class="{CODEHILITE_CLASS}"' in html:
            html = f"<style>\n{self.stylesheet}\n</style>\n{html}"
        return html

    def document(self, text: str, template: str = DEFAULT_TEMPLATE) -> str:
        """Render ``text`` and splice the body into ``template``."""
        return compose(self.body(text), template)

    def _highlight(self, code: str, language: str, _attrs: str) -> str:
        """Highlight one fenced block; markdown-it keeps output starting with ``<pre``."""
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        highlighted = highlight(code, lexer, self._formatter)
        return (
            f'<pre class="{CODEHILITE_CLASS}" data-language="{escape(lang, quote=True)}">'
            f"<code>{highlighted}</code></pre>"
        )


@functools.cache
def _default_renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def render(markdown_text: str, template: str = DEFAULT_TEMPLATE) -> str:
    """Render a Markdown document into a complete HTML page.

    Parameters
    ----------
    markdown_text : str
        Raw Markdown source.
    template : str, optional
        Page template containing the ``$$CONTENT$$`` placeholder. Callers are
        expected to have checked the placeholder (see
        :func:`~mdtransform.renderer.template.require_placeholder`).

    Returns
    -------
    str
        ``template`` with every placeholder replaced by the rendered body.

    Examples
    --------
    >>> render("# Hello World", "$$CONTENT$$")
    '<h1 id="hello-world">Hello World</h1>\\n'
    """
    return _default_renderer().document(markdown_text, template)


__all__ = ["MarkdownRenderer", "build_parser", "render"]
