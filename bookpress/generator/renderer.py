"""Render chapter markdown into an HTML fragment.

:class:`HtmlContentRenderer` wires the pipeline together. It parses markdown
into markdown-it tokens, then normalizes fence info strings, rewrites link
destinations, wraps tables, and optionally anchors headings. Footnotes are
collated last and the token stream is serialized, with the footnote list
appended at the end.
"""

from __future__ import annotations

import typing as typ

from bookpress.config.models import MarkdownExtensions
from bookpress.markdown_parser import new_markdown_parser, parse_events

from .footnotes import FootnoteCollator
from .link_rewriter import LinkRewriter
from .models import RenderContext
from .postprocess import HeadingAnchors, normalize_code_fence, wrap_tables

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import PurePath

    from markdown_it.token import Token


class HtmlContentRenderer:
    """Render book markdown for standalone pages or the print page."""

    def __init__(
        self,
        extensions: MarkdownExtensions | None = None,
        redirects: cabc.Mapping[str, str] | None = None,
    ) -> None:
        """Initialize a renderer with parser extensions and a redirect table.

        Parameters
        ----------
        extensions : MarkdownExtensions, optional
            Markdown syntax extensions; defaults to ``MarkdownExtensions()``.
        redirects : Mapping[str, str], optional
            Redirect table consulted when rendering for the print page.
        """
        self.extensions = extensions or MarkdownExtensions()
        self.redirects = dict(redirects or {})
        self._md = new_markdown_parser(self.extensions)

    def markdown(
        self,
        text: str,
        *,
        path: str | PurePath | None = None,
        id_counter: dict[str, int] | None = None,
    ) -> str:
        """Render markdown into an HTML fragment.

        Parameters
        ----------
        text : str
            Markdown source of one page.
        path : str or PurePath, optional
            Book-relative source path of the page. Passing a path renders for
            the print page; ``None`` renders a standalone page.
        id_counter : dict[str, int], optional
            Caller-owned heading id counter. When given, headings receive
            unique ids and self-links and the counter is updated in place.

        Returns
        -------
        str
            HTML fragment for embedding into a page template.

        Raises
        ------
        ValueError
            If ``path`` is not valid UTF-8.
        """
        context = RenderContext.build(path, self.redirects)
        rewriter = LinkRewriter(context)
        collator = FootnoteCollator(context)

        events: cabc.Iterable[Token] = parse_events(text, parser=self._md)
        events = map(normalize_code_fence, events)
        events = map(rewriter.adjust, events)
        events = wrap_tables(events)
        if id_counter is not None:
            events = HeadingAnchors(context, id_counter).apply(events)
        # Collate footnotes last so definition bodies were already rewritten.
        body = self._serialize(list(collator.collect(events)))
        return body + collator.render_definitions(self._serialize)

    def _serialize(self, tokens: list[Token]) -> str:
        return self._md.renderer.render(tokens, self._md.options, {})


def render_markdown(
    text: str,
    *,
    smart_punctuation: bool = False,
    path: str | PurePath | None = None,
    redirects: cabc.Mapping[str, str] | None = None,
) -> str:
    """Render ``text`` with the default extensions.

    Examples
    --------
    >>> render_markdown("[example](example.md)")
    '<p><a href="example.html">example</a></p>\\n'
    """
    extensions = MarkdownExtensions(smart_punctuation=smart_punctuation)
    renderer = HtmlContentRenderer(extensions, redirects)
    return renderer.markdown(text, path=path)


__all__ = ["HtmlContentRenderer", "render_markdown"]
