"""Typed dataclasses describing bookpress render configuration."""

from __future__ import annotations

import dataclasses as dc


class RenderConfigError(ValueError):
    """Raised when the render configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class MarkdownExtensions:
    """Markdown syntax extensions enabled on the parser."""

    tables: bool = True
    footnotes: bool = True
    strikethrough: bool = True
    tasklists: bool = True
    heading_attributes: bool = True
    smart_punctuation: bool = False


@dc.dataclass(slots=True)
class RenderConfig:
    """A fully resolved render configuration sourced from YAML."""

    extensions: MarkdownExtensions = dc.field(default_factory=MarkdownExtensions)
    redirects: dict[str, str] = dc.field(default_factory=dict)


__all__ = ["MarkdownExtensions", "RenderConfig", "RenderConfigError"]
