"""Render pipeline turning book markdown into standalone and print-page HTML."""

from .footnotes import FootnoteCollator
from .link_rewriter import LinkRewriter
from .models import FootnoteDefinition, FootnoteUsage, RenderContext
from .print_page import render_print_page
from .renderer import HtmlContentRenderer, render_markdown

__all__ = [
    "FootnoteCollator",
    "FootnoteDefinition",
    "FootnoteUsage",
    "HtmlContentRenderer",
    "LinkRewriter",
    "RenderContext",
    "render_markdown",
    "render_print_page",
]
