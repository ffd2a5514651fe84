"""Behaviour tests for heading anchors and the title directive.

These pytest-bdd scenarios render small Markdown snippets through
``mdtransform.render`` with the built-in page template and inspect the result
with BeautifulSoup. The feature files ``heading_anchors.feature`` and
``title_directive.feature`` describe the expected pages.

Usage
-----
Run ``pytest tests/bdd/test_rendering.py -v`` after installing the test extra
(``pip install -e .[test]``). No network access or fixtures beyond
``scenario_state`` are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from mdtransform import render

FEATURES_DIR = Path(__file__).resolve().parents[2] / "features"
scenarios(FEATURES_DIR / "heading_anchors.feature")
scenarios(FEATURES_DIR / "title_directive.feature")


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return BeautifulSoup(typ.cast("str", scenario_state["html"]), "html.parser")


@given(parsers.parse('the markdown "{markdown}"'))
def given_markdown(markdown: str, scenario_state: dict[str, object]) -> None:
    """Store the Markdown source for the scenario."""
    scenario_state["markdown"] = markdown


@when("I render the markdown with the default template")
def when_render(scenario_state: dict[str, object]) -> None:
    """Render the stored Markdown into a full page."""
    scenario_state["html"] = render(typ.cast("str", scenario_state["markdown"]))


@then(parsers.parse('the {tag} heading has id "{anchor}" and text "{text}"'))
def then_heading_has_anchor(
    tag: str, anchor: str, text: str, scenario_state: dict[str, object]
) -> None:
    """Verify the rendered heading tag, id and visible text."""
    heading = _soup(scenario_state).find(tag)
    assert heading is not None, f"expected a <{tag}> element in the rendered page"
    assert heading.get("id") == anchor, (
        f"expected id {anchor!r}, got {heading.get('id')!r}"
    )
    assert heading.get_text() == text


@then(parsers.parse('the page title is "{title}"'))
def then_page_title(title: str, scenario_state: dict[str, object]) -> None:
    """Verify the title directive produced a <title> element."""
    element = _soup(scenario_state).find("title")
    assert element is not None, "expected a <title> element"
    assert element.get_text() == title


@then(parsers.parse('a centred heading shows "{title}"'))
def then_centred_heading(title: str, scenario_state: dict[str, object]) -> None:
    """Verify the title block holds a centred heading and a rule."""
    block = _soup(scenario_state).select_one("div.page-title")
    assert block is not None, "expected the title block container"
    assert "text-align: center" in block.get("style", "")
    heading = block.find("h1")
    assert heading is not None
    assert heading.get_text() == title
    assert block.find("hr") is not None, "expected a horizontal rule in the title block"


@then(parsers.parse('no element carries the id "{anchor}"'))
def then_no_anchor(anchor: str, scenario_state: dict[str, object]) -> None:
    """Verify the replaced heading left no anchor behind."""
    html = typ.cast("str", scenario_state["html"])
    assert _soup(scenario_state).find(id=anchor) is None
    assert f'id="{anchor}"' not in html
