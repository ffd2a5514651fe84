"""Rewrite heading tokens so every heading carries an anchor id.

markdown-it-py hands back a flat sequence of block tokens in which each
heading appears as ``heading_open``, one ``inline`` token holding the heading
text, and ``heading_close``. :class:`HeadingRewriter` walks that sequence once,
swallowing each ``heading_open`` and re-opening the heading inside the inline
token as raw HTML once the text, and therefore the slug, is known. The
untouched ``heading_close`` then closes the tag as usual. First-level headings
that start with ``TITLE: `` are replaced by a title block instead.

Example
-------
>>> from markdown_it import MarkdownIt
>>> md = MarkdownIt("commonmark")
>>> tokens = md.parse("# Hello World")
>>> md.renderer.render(rewrite_headings(tokens), md.options, {})
'<h1 id="hello-world">Hello World</h1>\\n'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from markdown_it.token import Token

from .slug import slugify
from .title import match_title, title_block

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

_TEXT_CHILDREN = frozenset({"text", "text_special", "code_inline"})


@dc.dataclass(frozen=True, slots=True)
class Idle:
    """No heading is waiting for its text."""


@dc.dataclass(frozen=True, slots=True)
class InHeading:
    """A ``heading_open`` was swallowed and its anchor is not assigned yet."""

    level: int


@dc.dataclass(frozen=True, slots=True)
class InTitle:
    """The pending heading was replaced by a title block."""

    level: int


HeadingState = Idle | InHeading | InTitle

IDLE = Idle()


def heading_level(token: Token) -> int:
    """Return the numeric level of a heading token (``h3`` -> ``3``)."""
    return int(token.tag[1:])


def heading_text(token: Token) -> str:
    """Return the plain text of an inline token, dropping inline markup."""
    children = token.children or []
    return "".join(child.content for child in children if child.type in _TEXT_CHILDREN)


def _line(token: Token) -> int | None:
    return token.map[0] + 1 if token.map else None


class HeadingRewriter:
    """Single-pass heading rewriter over a markdown-it token stream.

    An instance holds the state for exactly one pass; create a new rewriter
    (or call :func:`rewrite_headings`) for every document.
    """

    def __init__(self) -> None:
        self.state: HeadingState = IDLE

    def rewrite(self, tokens: cabc.Iterable[Token]) -> cabc.Iterator[Token]:
        """Yield the rewritten token stream, lazily and in document order."""
        for token in tokens:
            yield from self.step(token)

    def step(self, token: Token) -> tuple[Token, ...]:
        """Consume one token and return the tokens that replace it.

        Parameters
        ----------
        token : Token
            Next block-level token from the parser.

        Returns
        -------
        tuple[Token, ...]
            Zero or more tokens to forward to the HTML renderer.
        """
        state = self.state
        match token.type:
            case "heading_open":
                if not isinstance(state, Idle):
                    logger.warning(
                        "Heading on line %s opened while %r was pending; "
                        "dropping the stale heading state.",
                        _line(token),
                        state,
                    )
                self.state = InHeading(heading_level(token))
                return ()
            case "inline" if isinstance(state, InHeading):
                return (self._rewrite_text(state.level, token),)
            case "heading_close" if isinstance(state, InTitle):
                self.state = IDLE
                return ()
            case "heading_close" if isinstance(state, InHeading):
                # Empty heading: nothing re-opened the swallowed tag yet.
                self.state = IDLE
                opening = Token("html_block", "", 0, content=_opening_tag(state.level, ""))
                return (opening, token)
            case _:
                return (token,)

    def _rewrite_text(self, level: int, token: Token) -> Token:
        text = heading_text(token)
        title = match_title(level, text)
        if title is not None:
            self.state = InTitle(level)
            logger.debug("Replacing heading on line %s with title %r", _line(token), title)
            return Token(
                "html_block",
                "",
                0,
                map=token.map,
                block=True,
                content=title_block(title),
            )

        self.state = IDLE
        opening = Token("html_inline", "", 0, content=_opening_tag(level, slugify(text)))
        return token.copy(children=[opening, *(token.children or [])])


def _opening_tag(level: int, slug: str) -> str:
    return f'<h{level} id="{slug}">'


def rewrite_headings(tokens: cabc.Iterable[Token]) -> list[Token]:
    """Rewrite ``tokens`` with a fresh :class:`HeadingRewriter`.

    The result is materialised because markdown-it-py's renderer indexes into
    the token sequence.
    """
    return list(HeadingRewriter().rewrite(tokens))


__all__ = [
    "IDLE",
    "HeadingRewriter",
    "HeadingState",
    "Idle",
    "InHeading",
    "InTitle",
    "heading_level",
    "heading_text",
    "rewrite_headings",
]
