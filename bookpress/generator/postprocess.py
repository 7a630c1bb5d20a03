"""Structural rewrites applied to the token stream before serialization."""

from __future__ import annotations

import typing as typ

from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token

from bookpress._constants import (
    HEADER_LINK_TEMPLATE,
    TABLE_WRAPPER_CLOSE,
    TABLE_WRAPPER_OPEN,
)
from bookpress.anchors import unique_id_from_content

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import RenderContext

HEADING_TEXT_TYPES = frozenset({"text", "code_inline"})


def html_token(content: str, *, inline: bool = False) -> Token:
    """Return a raw HTML token (block-level unless ``inline``)."""
    return Token("html_inline" if inline else "html_block", "", 0, content=content)


def wrap_tables(events: cabc.Iterable[Token]) -> cabc.Iterator[Token]:
    """Surround every table with a ``.table-wrapper`` div for overflow rules."""
    for token in events:
        if token.type == "table_open":
            yield html_token(TABLE_WRAPPER_OPEN)
            yield token
        elif token.type == "table_close":
            yield token
            yield html_token(TABLE_WRAPPER_CLOSE)
        else:
            yield token


def normalize_code_fence(token: Token) -> Token:
    """Join a fence's space-separated attributes into one class string.

    Every space or tab becomes ``,`` and any other whitespace is dropped, so
    ```` ```rust, no_run ```` renders as ``class="language-rust,,no_run"``.
    """
    if token.type != "fence" or not token.info:
        return token
    info = "".join("," if ch in " \t" else ch for ch in token.info.strip())
    info = "".join(ch for ch in info if not ch.isspace())
    return token.copy(info=info)


def _heading_html(inline: Token) -> str:
    """Return the heading's inline content as HTML for id generation."""
    parts: list[str] = []
    for child in inline.children or []:
        if child.type in HEADING_TEXT_TYPES:
            parts.append(escapeHtml(child.content))
        elif child.type == "html_inline":
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts)


class HeadingAnchors:
    """Give headings unique ids and wrap their text in a self-link.

    Parameters
    ----------
    context : RenderContext
        Supplies the page id used to prefix ids on the print page.
    id_counter : dict[str, int]
        Caller-owned counter shared across a page, or across every chapter of
        the print page. Mutated in place.
    """

    def __init__(self, context: RenderContext, id_counter: dict[str, int]) -> None:
        self.context = context
        self.id_counter = id_counter

    def apply(self, events: cabc.Iterable[Token]) -> cabc.Iterator[Token]:
        """Yield ``events`` with each heading anchored."""
        stream = iter(events)
        for token in stream:
            if token.type != "heading_open":
                yield token
                continue
            inline = next(stream, None)
            if inline is None or inline.type != "inline":
                yield token
                if inline is not None:
                    yield inline
                continue
            anchor = self._anchor_id(token, inline)
            yield token.copy(attrs={**token.attrs, "id": anchor})
            link_open = HEADER_LINK_TEMPLATE.format(anchor=escapeHtml(anchor))
            children = [
                html_token(link_open, inline=True),
                *(inline.children or []),
                html_token("</a>", inline=True),
            ]
            yield inline.copy(children=children)

    def _anchor_id(self, heading: Token, inline: Token) -> str:
        explicit = heading.attrGet("id")
        if explicit is not None:
            return str(explicit)
        anchor = unique_id_from_content(_heading_html(inline), self.id_counter)
        page_id = self.context.page_id
        return f"{page_id}-{anchor}" if page_id else anchor


__all__ = ["HeadingAnchors", "html_token", "normalize_code_fence", "wrap_tables"]
