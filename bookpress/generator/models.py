"""Shared dataclasses used by the render pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import PurePath

from bookpress.paths import parent_dir, print_page_id

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown_it.token import Token


def _coerce_page_path(path: str | PurePath) -> str:
    """Return ``path`` as a forward-slash string, rejecting non-UTF-8 names."""
    text = path.as_posix() if isinstance(path, PurePath) else str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = f"Page path {text!r} is not valid UTF-8."
        raise ValueError(msg) from exc
    return text


@dc.dataclass(frozen=True, slots=True)
class RenderContext:
    """Inputs that decide how destinations are rewritten for one render call.

    Attributes
    ----------
    page_path : str or None
        Book-relative source path of the page (``"chapter/intro.md"``). When
        set, the page is rendered for the aggregated print page.
    redirects : Mapping[str, str]
        Redirect table mapping an original relative path (optionally with a
        fragment) to its replacement path or absolute URL. Only consulted in
        print mode.
    """

    page_path: str | None = None
    redirects: cabc.Mapping[str, str] = dc.field(default_factory=dict)

    @classmethod
    def build(
        cls,
        page_path: str | PurePath | None = None,
        redirects: cabc.Mapping[str, str] | None = None,
    ) -> RenderContext:
        """Validate ``page_path`` and return a context for one render call."""
        path = None if page_path is None else _coerce_page_path(page_path)
        return cls(page_path=path, redirects=dict(redirects or {}))

    @property
    def is_print(self) -> bool:
        """Return True when rendering for the aggregated print page."""
        return self.page_path is not None

    @property
    def page_id(self) -> str:
        """Anchor prefix of the current page; empty in standalone mode."""
        if self.page_path is None:
            return ""
        return print_page_id(self.page_path)

    @property
    def base_prefix(self) -> str:
        """Directory of the current page with a trailing slash, or ``""``."""
        if self.page_path is None:
            return ""
        base = parent_dir(self.page_path)
        return f"{base}/" if base else ""

    @property
    def display_path(self) -> str:
        """Page path for diagnostics."""
        return self.page_path or "<unknown>"


@dc.dataclass(slots=True)
class FootnoteDefinition:
    """A footnote body captured from the token stream.

    Attributes
    ----------
    name : str
        HTML-escaped footnote label.
    events : list[Token]
        Tokens between the definition's start and end markers.
    """

    name: str
    events: list[Token] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class FootnoteUsage:
    """Display number and reference count for a referenced footnote."""

    number: int
    count: int = 0


__all__ = ["FootnoteDefinition", "FootnoteUsage", "RenderContext"]
