"""Utility helpers shared by the render configuration loader."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import MarkdownExtensions, RenderConfigError

EXTENSION_FIELDS = frozenset(field.name for field in dc.fields(MarkdownExtensions))


def _normalize_key(key: object) -> str:
    """Accept ``smart-punctuation`` as well as ``smart_punctuation``."""
    return str(key).strip().replace("-", "_")


def _build_extensions(payload: typ.Mapping[str, typ.Any] | None) -> MarkdownExtensions:
    """Build MarkdownExtensions from the ``markdown`` mapping, validating flags."""
    if not payload:
        return MarkdownExtensions()
    flags: dict[str, bool] = {}
    for raw_key, value in payload.items():
        key = _normalize_key(raw_key)
        if key not in EXTENSION_FIELDS:
            known = ", ".join(sorted(EXTENSION_FIELDS))
            msg = f"Unknown markdown extension '{raw_key}'. Known extensions: {known}"
            raise RenderConfigError(msg)
        if not isinstance(value, bool):
            msg = f"Markdown extension '{raw_key}' must be true or false."
            raise RenderConfigError(msg)
        flags[key] = value
    return MarkdownExtensions(**flags)


def _build_redirects(payload: typ.Mapping[str, typ.Any] | None) -> dict[str, str]:
    """Return the redirect table, requiring string sources and targets."""
    redirects: dict[str, str] = {}
    for source, target in (payload or {}).items():
        match source, target:
            case str(), str() if source.strip() and target.strip():
                redirects[source.strip()] = target.strip()
            case _:
                msg = f"Redirect '{source}' must map a path to a non-empty string."
                raise RenderConfigError(msg)
    return redirects


__all__ = ["EXTENSION_FIELDS", "_build_extensions", "_build_redirects"]
