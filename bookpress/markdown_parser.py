r"""Configure markdown-it and expose its token stream.

The renderer never walks markdown grammar itself. It asks this module for a
parser configured with the book's syntax extensions and post-processes the
resulting token stream. Footnotes are parsed by ``mdit_py_plugins`` but the
plugin's "move everything to the end" rule is switched off: definitions stay
where they were written, as ``footnote_reference_open``/``_close`` pairs, and
references stay as ``footnote_ref`` tokens, so the footnote collator can do
its own numbering and placement.

Example
-------
>>> from bookpress.markdown_parser import parse_events
>>> [token.type for token in parse_events("# Title {#intro}")]
['heading_open', 'inline', 'heading_close']
>>> parse_events("# Title {#intro}")[0].attrs
{'id': 'intro'}
"""

from __future__ import annotations

import re
import typing as typ

from markdown_it import MarkdownIt
from mdit_py_plugins.attrs.parse import ParseError, parse
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from .config.models import MarkdownExtensions

if typ.TYPE_CHECKING:
    from markdown_it.rules_core import StateCore
    from markdown_it.token import Token

HEADING_ATTRS_PATTERN = re.compile(r"\s*(?P<attrs>\{[^{}\n]*\})\s*$")


def _apply_heading_attributes(state: StateCore) -> None:
    """Move a trailing ``{#id .class key=value}`` block onto the heading tag."""
    tokens = state.tokens
    for idx, token in enumerate(tokens[:-1]):
        if token.type != "heading_open":
            continue
        inline = tokens[idx + 1]
        match = HEADING_ATTRS_PATTERN.search(inline.content)
        if match is None:
            continue
        candidate = match.group("attrs")
        try:
            end, attrs = parse(candidate)
        except ParseError:
            continue
        if candidate[end:].lstrip("}").strip():
            continue
        inline.content = inline.content[: match.start()].rstrip()
        for key, value in attrs.items():
            if key == "class":
                token.attrJoin("class", value)
            else:
                token.attrSet(key, value)


def new_markdown_parser(extensions: MarkdownExtensions | None = None) -> MarkdownIt:
    """Return a CommonMark parser with the requested extensions enabled.

    Parameters
    ----------
    extensions : MarkdownExtensions, optional
        Extension switches; defaults to ``MarkdownExtensions()`` (everything
        but smart punctuation).

    Returns
    -------
    MarkdownIt
        Parser whose ``parse`` output is the event stream consumed by the
        renderer.
    """
    ext = extensions or MarkdownExtensions()
    options: dict[str, typ.Any] = {"typographer": ext.smart_punctuation}
    md = MarkdownIt("commonmark", options)
    if ext.tables:
        md.enable("table")
    if ext.strikethrough:
        md.enable("strikethrough")
    if ext.smart_punctuation:
        md.enable(["replacements", "smartquotes"])
    if ext.footnotes:
        md.use(footnote_plugin)
        md.disable(["footnote_tail", "footnote_inline"], ignoreInvalid=True)
    if ext.tasklists:
        md.use(tasklists_plugin)
    if ext.heading_attributes:
        md.core.ruler.after("block", "heading_attrs", _apply_heading_attributes)
    return md


def parse_events(
    text: str,
    extensions: MarkdownExtensions | None = None,
    *,
    parser: MarkdownIt | None = None,
) -> list[Token]:
    """Parse ``text`` into the markdown-it token stream.

    Malformed markdown never fails; the parser degrades to literal text.
    Pass ``parser`` to reuse an instance built by :func:`new_markdown_parser`.
    """
    md = parser or new_markdown_parser(extensions)
    return md.parse(text, {})


__all__ = ["new_markdown_parser", "parse_events"]
