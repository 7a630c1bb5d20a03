"""Behaviour tests for link rewriting on the aggregated print page.

These pytest-bdd scenarios render a small book through
``render_print_page`` and check where the chapter's link ends up. The feature
file ``print_links.feature`` covers cross-chapter links, redirects, and links
that leave the book.

Usage
-----
Run ``pytest tests/bdd/test_print_links.py -v`` after installing the test
extra (``pip install -e .[test]``). Everything is rendered in memory, so no
fixtures beyond ``scenario_state`` are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from bookpress.generator import HtmlContentRenderer, render_print_page

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "print_links.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"redirects": {}}


@given(
    parsers.parse('a book with a chapter at "{page_path}" linking to "{target}"')
)
def given_book(page_path: str, target: str, scenario_state: dict[str, object]) -> None:
    """Store a two-chapter book whose last chapter holds the link under test."""
    scenario_state["chapters"] = [
        ("first/nested.md", "# First Nested\n\n## Intro\n"),
        (page_path, f"See [the target]({target}).\n"),
    ]


@given(parsers.parse('a redirect from "{source}" to "{target}"'))
def given_redirect(source: str, target: str, scenario_state: dict[str, object]) -> None:
    """Add an entry to the redirect table."""
    redirects = typ.cast("dict[str, str]", scenario_state["redirects"])
    redirects[source] = target


@when("I render the book's print page")
def when_render_print_page(scenario_state: dict[str, object]) -> None:
    """Render every chapter into one print page fragment."""
    chapters = typ.cast("list[tuple[str, str]]", scenario_state["chapters"])
    redirects = typ.cast("dict[str, str]", scenario_state["redirects"])
    renderer = HtmlContentRenderer(redirects=redirects)
    html = render_print_page(chapters, renderer)
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


@then(parsers.parse('the link points at "{href}"'))
def then_link_points_at(href: str, scenario_state: dict[str, object]) -> None:
    """Check the rewritten destination of the chapter's link."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    link = soup.find("a", string="the target")
    assert link is not None, "expected the chapter link in the print page"
    assert link["href"] == href


@then(parsers.parse('the print page has a marker for "{page_id}"'))
def then_marker_present(page_id: str, scenario_state: dict[str, object]) -> None:
    """Check that the linked chapter's id marker exists."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    assert soup.find("div", id=page_id) is not None
