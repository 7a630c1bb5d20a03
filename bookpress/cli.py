"""Cyclopts CLI entrypoint for rendering book chapters to HTML fragments.

The ``bookpress`` console script renders a single chapter (standalone, or as
it appears on the print page when ``--page-path`` is given) or a sequence of
chapters concatenated into one print page. Output goes to stdout; templating
and writing files is left to the caller.

Examples
--------
Render one chapter as a standalone page:

>>> from bookpress.cli import app
>>> app(["render", "src/intro.md"])  # doctest: +SKIP

Render the print page for two chapters under ``src``:

>>> app(["print", "src", "intro.md", "guide/setup.md"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import RenderConfig, load_render_config
from .generator import HtmlContentRenderer, render_print_page

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="bookpress", config=cyclopts.config.Env("BOOKPRESS_", command=False))  # type: ignore[unknown-argument]


def log_error_chain(error: BaseException) -> None:
    """Log ``error`` followed by each exception in its ``__cause__`` chain."""
    logger.error("Error: %s", error)
    cause = error.__cause__
    while cause is not None:
        logger.error("\tCaused By: %s", cause)
        cause = cause.__cause__


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


def _build_renderer(config: Path | None) -> HtmlContentRenderer:
    """Return a renderer configured from ``config`` or the defaults."""
    render_config = load_render_config(config) if config else RenderConfig()
    logger.debug(
        "rendering with %s and %d redirect(s)",
        render_config.extensions,
        len(render_config.redirects),
    )
    return HtmlContentRenderer(render_config.extensions, render_config.redirects)


@app.command(help="Render one markdown chapter to an HTML fragment on stdout.")
def render(
    source: Path,
    *,
    page_path: typ.Annotated[
        str | None,
        Parameter(help="Book-relative path of the chapter; selects print-page rendering"),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to the render config YAML")
    ] = None,
    verbose: bool = False,
) -> None:
    """Render ``source`` and write the fragment to stdout.

    Parameters
    ----------
    source : Path
        Markdown file to render.
    page_path : str or None, optional
        Book-relative path of the chapter. When given, links are rewritten as
        they would be on the print page.
    config : Path or None, optional
        YAML file with markdown extensions and redirects.
    verbose : bool, optional
        Log debug output.
    """
    _configure_logging(verbose)
    renderer = _build_renderer(config)
    text = source.read_text(encoding="utf-8")
    print(renderer.markdown(text, path=page_path), end="")


@app.command(name="print", help="Render chapters, in order, as one print page on stdout.")
def print_page(
    root: Path,
    *chapters: str,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to the render config YAML")
    ] = None,
    verbose: bool = False,
) -> None:
    """Render ``chapters`` (relative to ``root``) into one print page fragment.

    The chapter order on the command line is the reading order; every chapter
    shares one heading id counter.
    """
    _configure_logging(verbose)
    renderer = _build_renderer(config)
    pairs = [
        (chapter, (root / chapter).read_text(encoding="utf-8")) for chapter in chapters
    ]
    print(render_print_page(pairs, renderer), end="")


def main() -> None:
    """Invoke the Cyclopts application behind the ``bookpress`` console command.

    Configuration, YAML, and file errors are logged with their cause chain
    and turned into a non-zero exit status.
    """
    try:
        app()
    except (OSError, TypeError, ValueError, YAMLError) as exc:
        log_error_chain(exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
