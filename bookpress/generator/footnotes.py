"""Collect footnote definitions and re-emit them as a back-linked list.

Footnotes are handled in two passes over a single traversal. While the token
stream flows through :meth:`FootnoteCollator.collect`, definitions are pulled
out into per-name buffers and each reference is replaced by a numbered
superscript link. Once the main body has been rendered,
:meth:`FootnoteCollator.render_definitions` appends the referenced
definitions, ordered by first reference, each followed by one back-link per
reference.
"""

from __future__ import annotations

import logging
import typing as typ

from bookpress.escaping import escape_special

from .models import FootnoteDefinition, FootnoteUsage
from .postprocess import html_token

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown_it.token import Token

    from .models import RenderContext

logger = logging.getLogger(__name__)


class FootnoteCollator:
    """Number footnote references and buffer definitions for one page.

    Attributes
    ----------
    definitions : dict[str, FootnoteDefinition]
        First definition seen for each escaped footnote name.
    usages : dict[str, FootnoteUsage]
        Display number and reference count per referenced name, in first
        reference order.
    """

    def __init__(self, context: RenderContext) -> None:
        self.context = context
        self.definitions: dict[str, FootnoteDefinition] = {}
        self.usages: dict[str, FootnoteUsage] = {}
        self._current: FootnoteDefinition | None = None

    def collect(self, events: cabc.Iterable[Token]) -> cabc.Iterator[Token]:
        """Yield the body stream with definitions removed and references linked."""
        for token in events:
            match token.type:
                case "footnote_reference_open":
                    self._open_definition(token)
                case "footnote_reference_close":
                    self._close_definition()
                case _:
                    token = self._link_references(token)
                    if self._current is None:
                        yield token
                    else:
                        self._current.events.append(token)

    def render_definitions(self, render: cabc.Callable[[list[Token]], str]) -> str:
        """Return the footnote list HTML, or ``""`` when nothing is referenced.

        Parameters
        ----------
        render : Callable[[list[Token]], str]
            Serializes a token list to HTML with the page's renderer.
        """
        referenced: list[FootnoteDefinition] = []
        for name, definition in self.definitions.items():
            if name in self.usages:
                referenced.append(definition)
            else:
                logger.warning(
                    "footnote `%s` in `%s` is defined but not referenced",
                    name,
                    self.context.display_path,
                )
        if not referenced:
            return ""
        referenced.sort(key=lambda definition: self.usages[definition.name].number)

        page_id = self.context.page_id
        prefix = f"{page_id}-" if page_id else ""
        parts = ['<hr>\n<ol class="footnote-definition">']
        for definition in referenced:
            name = definition.name
            events = [html_token(f'<li id="footnote-{name}">'), *definition.events]
            for usage in range(1, self.usages[name].count + 1):
                nth = "" if usage == 1 else str(usage)
                backlink = html_token(
                    f' <a href="#{prefix}fr-{name}-{usage}">↩{nth}</a>'
                )
                # Keep the back-link inside a trailing paragraph.
                if events[-1].type == "paragraph_close":
                    events.insert(len(events) - 1, backlink)
                else:
                    events.append(backlink)
            events.append(html_token("</li>\n"))
            parts.append(render(events))
        parts.append("</ol>")
        return "".join(parts)

    def _open_definition(self, token: Token) -> None:
        if self._current is not None:
            logger.warning(
                "internal bug: nested footnote not expected in %s",
                self.context.display_path,
            )
            self._close_definition()
        label = str(token.meta.get("label", ""))
        self._current = FootnoteDefinition(name=escape_special(label))

    def _close_definition(self) -> None:
        definition, self._current = self._current, None
        if definition is None:
            return
        if definition.name in self.definitions:
            logger.warning(
                "footnote `%s` in %s defined multiple times - not updating to new definition",
                definition.name,
                self.context.display_path,
            )
            return
        self.definitions[definition.name] = definition

    def _link_references(self, token: Token) -> Token:
        """Replace ``footnote_ref`` children of an inline token with HTML links."""
        if token.type != "inline" or not token.children:
            return token
        if not any(child.type == "footnote_ref" for child in token.children):
            return token
        children = [
            self._reference_token(child) if child.type == "footnote_ref" else child
            for child in token.children
        ]
        return token.copy(children=children)

    def _reference_token(self, token: Token) -> Token:
        name = escape_special(str(token.meta.get("label", "")))
        usage = self.usages.get(name)
        if usage is None:
            usage = self.usages[name] = FootnoteUsage(number=len(self.usages) + 1)
        usage.count += 1
        return html_token(
            f'<sup class="footnote-reference" id="fr-{name}-{usage.count}">'
            f'<a href="#footnote-{name}">{usage.number}</a></sup>',
            inline=True,
        )


__all__ = ["FootnoteCollator"]
