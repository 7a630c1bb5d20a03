"""Concatenate rendered chapters into the single print page."""

from __future__ import annotations

import typing as typ

from bookpress._constants import PAGE_MARKER_TEMPLATE, PRINT_PAGE_BREAK

from .models import RenderContext

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import PurePath

    from .renderer import HtmlContentRenderer


def render_print_page(
    chapters: cabc.Iterable[tuple[str | PurePath, str]],
    renderer: HtmlContentRenderer,
    *,
    id_counter: dict[str, int] | None = None,
) -> str:
    """Render ordered chapters into one HTML fragment.

    Parameters
    ----------
    chapters : Iterable[tuple[str | PurePath, str]]
        ``(book-relative path, markdown)`` pairs in reading order.
    renderer : HtmlContentRenderer
        Renderer whose redirect table applies to every chapter.
    id_counter : dict[str, int], optional
        Heading id counter shared by every chapter; a fresh one is used when
        omitted.

    Returns
    -------
    str
        Chapters separated by page breaks, each preceded by an empty ``div``
        carrying the chapter's page id so cross-chapter links resolve.
    """
    counter: dict[str, int] = {} if id_counter is None else id_counter
    parts: list[str] = []
    for index, (path, text) in enumerate(chapters):
        if index:
            parts.append(PRINT_PAGE_BREAK)
        page_id = RenderContext.build(path).page_id
        parts.append(PAGE_MARKER_TEMPLATE.format(page_id=page_id))
        parts.append(renderer.markdown(text, path=path, id_counter=counter))
    return "".join(parts)


__all__ = ["render_print_page"]
