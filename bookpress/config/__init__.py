"""Load and validate bookpress render configuration YAML.

This subpackage parses a book's ``book.yaml`` file into strongly typed
dataclasses: the markdown extensions enabled on the parser and the redirect
table consulted on the print page. The primary entry point is
:func:`load_render_config`.

Examples
--------
>>> from pathlib import Path
>>> from bookpress.config import load_render_config
>>> config = load_render_config(Path("book.yaml"))  # doctest: +SKIP
>>> config.redirects  # doctest: +SKIP
{'/old/page.html': '../new/page.html'}
"""

from .loader import load_render_config
from .models import MarkdownExtensions, RenderConfig, RenderConfigError

__all__ = [
    "MarkdownExtensions",
    "RenderConfig",
    "RenderConfigError",
    "load_render_config",
]
