"""Render a book's markdown chapters into HTML fragments.

This package turns chapter markdown into HTML for two delivery modes: one
standalone page per chapter, and a single print page holding the whole book,
where links between chapters become same-page anchors.

Exports
-------
- ``HtmlContentRenderer``: configurable renderer for one page at a time.
- ``render_markdown``: convenience wrapper using the default extensions.
- ``render_print_page``: concatenate ordered chapters into the print page.
- ``unique_id_from_content``: heading text to unique element id.
- ``app`` / ``main``: the ``bookpress`` Cyclopts CLI.

Examples
--------
>>> from bookpress import render_markdown
>>> render_markdown("[x](page.md#a)")
'<p><a href="page.html#a">x</a></p>\\n'
>>> render_markdown("[x](#a)", path="chapter/sub.md")
'<p><a href="#chapter-sub-a">x</a></p>\\n'
"""

from __future__ import annotations

from .anchors import unique_id_from_content
from .cli import app, main
from .generator import HtmlContentRenderer, render_markdown, render_print_page

__all__ = [
    "HtmlContentRenderer",
    "app",
    "main",
    "render_markdown",
    "render_print_page",
    "unique_id_from_content",
]
