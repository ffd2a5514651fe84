"""Behaviour tests for converting a Markdown tree into HTML files.

The ``batch_conversion.feature`` scenario builds a small docs tree in a
temporary directory, converts it with ``BatchConverter`` and a custom page
template, and checks the files written next to each source.

Usage
-----
Run ``pytest tests/bdd/test_batch_conversion.py -v``. Only pytest's
``tmp_path`` fixture is needed.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from mdtransform.batch import BatchConverter

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "batch_conversion.feature"
scenarios(FEATURE_FILE)

CUSTOM_TEMPLATE = '<html><body><main class="fixture">$$CONTENT$$</main></body></html>\n'


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a docs tree with Markdown and non-Markdown files")
def given_docs_tree(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Create a nested docs tree with two Markdown files and one text file."""
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "index.md").write_text("# TITLE: Home\n\nWelcome.\n", encoding="utf-8")
    (root / "guide" / "setup.md").write_text("## Install\n\nRun it.\n", encoding="utf-8")
    (root / "notes.txt").write_text("not markdown\n", encoding="utf-8")
    scenario_state["root"] = root


@when("I convert the docs tree with a custom template")
def when_convert(scenario_state: dict[str, object]) -> None:
    """Run the batch converter over the docs tree."""
    root = typ.cast("Path", scenario_state["root"])
    converter = BatchConverter(CUSTOM_TEMPLATE)
    scenario_state["written"] = converter.run([root])
    scenario_state["failures"] = converter.failures


@then("every Markdown file has a sibling HTML file")
def then_siblings_written(scenario_state: dict[str, object]) -> None:
    """Verify one HTML file per Markdown source, in sorted walk order."""
    root = typ.cast("Path", scenario_state["root"])
    written = typ.cast("list[Path]", scenario_state["written"])
    assert written == [root / "guide" / "setup.html", root / "index.html"]
    assert all(path.is_file() for path in written)
    assert scenario_state["failures"] == []


@then("the non-Markdown file is left alone")
def then_text_file_untouched(scenario_state: dict[str, object]) -> None:
    """Verify the text file was neither converted nor modified."""
    root = typ.cast("Path", scenario_state["root"])
    assert not (root / "notes.html").exists()
    assert (root / "notes.txt").read_text(encoding="utf-8") == "not markdown\n"


@then("the rendered pages use the custom template")
def then_template_used(scenario_state: dict[str, object]) -> None:
    """Verify the template wraps the rendered body of each page."""
    root = typ.cast("Path", scenario_state["root"])
    index = BeautifulSoup((root / "index.html").read_text(encoding="utf-8"), "html.parser")
    setup = BeautifulSoup(
        (root / "guide" / "setup.html").read_text(encoding="utf-8"), "html.parser"
    )
    assert index.select_one("main.fixture title").get_text() == "Home"
    heading = setup.select_one("main.fixture h2")
    assert heading is not None
    assert heading.get("id") == "install"
