"""Load render configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _build_extensions, _build_redirects
from .models import RenderConfig, RenderConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_render_config(path: Path) -> RenderConfig:
    """Load the YAML file describing markdown extensions and redirects.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``book.yaml``).

    Returns
    -------
    RenderConfig
        Parsed configuration with extension switches and the redirect table.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    RenderConfigError
        If a section has the wrong shape, an extension is unknown, or a
        redirect entry is not a string mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from bookpress.config import load_render_config
    >>> config = load_render_config(Path("book.yaml"))  # doctest: +SKIP
    >>> config.extensions.smart_punctuation  # doctest: +SKIP
    True
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    markdown_raw = raw.get("markdown") or {}
    redirects_raw = raw.get("redirects") or {}
    for section, payload in (("markdown", markdown_raw), ("redirects", redirects_raw)):
        if not isinstance(payload, dict):
            msg = f"Section '{section}' must be a mapping."
            raise RenderConfigError(msg)

    return RenderConfig(
        extensions=_build_extensions(markdown_raw),
        redirects=_build_redirects(redirects_raw),
    )


__all__ = ["load_render_config"]
