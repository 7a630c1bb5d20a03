"""Rewrite link, image, and raw HTML destinations for the current render mode.

Standalone pages keep cross-page links as separate ``.html`` pages. The print
page concatenates every chapter, so links into the book are turned into
same-page fragments built from the target page id (see
:func:`bookpress.paths.print_page_id`), following the redirect table when a
page has moved.
"""

from __future__ import annotations

import re
import typing as typ

from bookpress.paths import (
    escapes_root,
    has_scheme,
    normalize_path,
    normalize_print_page_id,
    parent_dir,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown_it.token import Token

    from .models import RenderContext

# Raw HTML arrives as fragments (one tag per inline token), so a parser that
# expects complete documents is no use here. Each pattern only matches inside
# a start tag.
A_HREF_PATTERN = re.compile(r'(<a [^>]*?href=")([^"]+?)"')
A_NAME_PATTERN = re.compile(r'(<a [^>]*?name=")([^"]+?)"')
IMG_SRC_PATTERN = re.compile(r'(<img [^>]*?src=")([^"]+?)"')
MARKDOWN_LINK_PATTERN = re.compile(r"(?P<link>[^#]*)\.(?:html|md)(?P<anchor>#.*)?", re.DOTALL)


def _order_redirects(
    redirects: cabc.Mapping[str, str],
) -> list[tuple[str, str, str]]:
    """Return ``(original, normalized_source, target)`` longest source first."""
    entries = [
        (original, normalize_path(original.lstrip("/")).lower(), target)
        for original, target in redirects.items()
    ]
    entries.sort(key=lambda entry: (-len(entry[1]), entry[0]))
    return entries


def _is_email_autolink(token: Token) -> bool:
    href = str(token.attrGet("href") or "")
    return token.markup == "autolink" and href.startswith("mailto:")


class LinkRewriter:
    """Rewrite destinations in the token stream for one render call."""

    def __init__(self, context: RenderContext) -> None:
        self.context = context
        self._redirects = _order_redirects(context.redirects)

    def adjust(self, token: Token) -> Token:
        """Return ``token`` with its link, image, or HTML destinations fixed."""
        match token.type:
            case "inline" if token.children:
                children = [self.adjust(child) for child in token.children]
                return token.copy(children=children)
            case "link_open":
                href = token.attrGet("href")
                if href is None or _is_email_autolink(token):
                    return token
                return token.copy(attrs={**token.attrs, "href": self.fix_link(str(href))})
            case "image":
                src = token.attrGet("src")
                if src is None:
                    return token
                fixed = self.fix_resource_link(str(src))
                return token.copy(attrs={**token.attrs, "src": fixed})
            case "html_block" | "html_inline":
                return token.copy(content=self.fix_html(token.content))
            case _:
                return token

    def fix_link(self, dest: str) -> str:
        """Rewrite an anchor destination.

        Parameters
        ----------
        dest : str
            Destination as written by the author.

        Returns
        -------
        str
            ``.md`` targets become ``.html``; on the print page, in-book
            targets become ``#<page-id>`` fragments. Scheme and root-relative
            destinations, and links escaping the book root, are returned as
            written apart from the extension fix.
        """
        if dest.startswith("#"):
            if not self.context.is_print:
                return dest
            return f"#{self.context.page_id}{dest.replace('#', '-')}"

        if has_scheme(dest) or dest.startswith("/"):
            return dest

        match = MARKDOWN_LINK_PATTERN.fullmatch(dest)
        if match:
            fixed = f"{match['link']}.html{match['anchor'] or ''}"
        else:
            fixed = dest
        fixed = f"{self.context.base_prefix}{fixed}"

        normalized = normalize_path(fixed)
        if escapes_root(normalized):
            return fixed
        if self.context.is_print:
            return self._fix_print_page_link(normalized)
        return normalized

    def fix_resource_link(self, dest: str) -> str:
        """Prefix a relative image or resource path with the page directory."""
        if has_scheme(dest) or dest.startswith("/"):
            return dest
        return f"{self.context.base_prefix}{dest}"

    def fix_html(self, html: str) -> str:
        """Rewrite ``<img src>``, ``<a name>`` and ``<a href>`` in raw HTML."""
        html = IMG_SRC_PATTERN.sub(
            lambda m: f'{m[1]}{self.fix_resource_link(m[2])}"', html
        )
        html = A_NAME_PATTERN.sub(lambda m: f'{m[1]}{self._fix_anchor_name(m[2])}"', html)
        return A_HREF_PATTERN.sub(lambda m: f'{m[1]}{self.fix_link(m[2])}"', html)

    def _fix_anchor_name(self, name: str) -> str:
        if not self.context.is_print:
            return name
        return f"{self.context.page_id}-{name}"

    def _fix_print_page_link(self, normalized: str) -> str:
        """Turn an in-book path into a print-page fragment, following redirects."""
        path_no_fragment, sep, fragment = normalized.partition("#")
        candidates = (normalized.lower(), path_no_fragment.lower())
        for original, source, target in self._redirects:
            if source not in candidates:
                continue

            if has_scheme(target):
                resolved = target
            else:
                base = normalize_path(parent_dir(path_no_fragment)).strip("/")
                resolved = f"{base}/{target}" if base else target.lstrip("/")

            # A redirect without its own fragment keeps the link's fragment.
            if "#" not in original and sep:
                joiner = "-" if "#" in resolved else "#"
                resolved = f"{resolved}{joiner}{fragment}"

            if has_scheme(target):
                return resolved
            normalized = normalize_path(resolved)
            break

        if escapes_root(normalized):
            return normalized
        return f"#{normalize_print_page_id(normalized)}"


__all__ = [
    "A_HREF_PATTERN",
    "A_NAME_PATTERN",
    "IMG_SRC_PATTERN",
    "LinkRewriter",
]
