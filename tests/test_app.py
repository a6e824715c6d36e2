"""End-to-end tests of the dashboard page."""

import re
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from panels.load_css import STYLE_PATH
from panels.state import INPUTS_KEY

APP_PATH = str(Path(__file__).resolve().parent.parent / "Emissions_tracker.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def metric_values(at):
    return {m.label: m.value for m in at.metric}


def captions(at):
    return [c.value for c in at.caption]


class TestDashboard:
    """Tests for the full page."""

    def test_example_figures(self, app):
        """First load shows the example figures and their changes."""
        assert app.number_input(key="previous-scope1").value == 12000.0
        assert app.number_input(key="current-scope3").value == 26000.0
        assert app.number_input(key="target").value == 10.0

        assert metric_values(app) == {
            "Total Emissions Change": "-1.1%",
            "Scope 1 Change": "-8.3%",
            "Scope 2 Change": "-6.2%",
            "Scope 3 Change": "4.0%",
        }
        assert "of 10% target" in captions(app)

    def test_editing_recomputes(self, app):
        app.number_input(key="current-scope3").set_value(20000.0).run()

        assert not app.exception
        assert metric_values(app)["Scope 3 Change"] == "-20.0%"
        snapshot = app.session_state[INPUTS_KEY]
        assert snapshot.current.scope3 == 20000.0

    def test_zero_baseline(self, app):
        """A scope with no previous emissions shows an infinite change."""
        app.number_input(key="previous-scope1").set_value(0.0).run()

        assert not app.exception
        assert metric_values(app)["Scope 1 Change"] == "+∞%"

    def test_target_caption(self, app):
        app.number_input(key="target").set_value(0.0).run()

        assert not app.exception
        assert "of 0% target" in captions(app)

    def test_reset(self, app):
        app.number_input(key="previous-scope2").set_value(1.0).run()
        app.button(key="reset_inputs").click().run()

        assert not app.exception
        assert app.number_input(key="previous-scope2").value == 8000.0
        assert metric_values(app)["Scope 2 Change"] == "-6.2%"


class TestStylesheet:
    """Tests for assets/style.css."""

    def test_custom_classes_are_used(self):
        """Every custom class in the stylesheet appears on the page.

        Streamlit's own classes (stApp, ...) are skipped.
        """
        css = STYLE_PATH.read_text()
        page = Path(APP_PATH).read_text()
        classes = set(re.findall(r"\.(?!st[A-Z])([a-z][\w-]*)", css))

        assert classes
        for name in classes:
            assert name in page, name
