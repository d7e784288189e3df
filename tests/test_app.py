from __future__ import annotations

import pytest
from streamlit.testing.v1 import AppTest

import core.data as data
from core.data import FetchError, parse_records


APP_TIMEOUT = 30


def _summary_labels(at: AppTest) -> list:
    return [b.label for b in at.button if (b.key or "").startswith("summary_")]


def _button_keys(at: AppTest) -> list:
    return [b.key for b in at.button]


@pytest.fixture
def sheet(monkeypatch, sample_csv):
    monkeypatch.setattr(data, "fetch_records", lambda: parse_records(sample_csv))


@pytest.fixture
def broken_sheet(monkeypatch):
    def fail():
        raise FetchError(url="https://example.invalid", message="boom", status_code=503)

    monkeypatch.setattr(data, "fetch_records", fail)


@pytest.fixture
def app() -> AppTest:
    return AppTest.from_file("../app.py", default_timeout=APP_TIMEOUT)


def test_failed_load_shows_banner_and_no_rows(app, broken_sheet):
    app.run()

    assert not app.exception
    assert [e.value for e in app.error] == ["Failed to load partnerships data. Use Refresh to try again."]
    assert [c.value for c in app.caption] == ["Showing 0 of 0 programs"]
    assert _summary_labels(app)[0] == "Total: 0"


def test_loaded_page_lists_all_rows(app, sheet):
    app.run()

    assert not app.exception
    assert not app.error
    assert [c.value for c in app.caption] == ["Showing 2 of 2 programs"]
    assert _summary_labels(app) == [
        "Total: 2",
        "In Progress: 1",
        "Ongoing: 0",
        "To be picked: 0",
        "Completed: 1",
    ]
    assert "clear_filters" not in _button_keys(app)


def test_summary_button_filters_but_keeps_counts(app, sheet):
    app.run()
    app.button(key="summary_Completed").click().run()

    assert not app.exception
    assert [c.value for c in app.caption] == ["Showing 1 of 2 programs"]
    assert _summary_labels(app)[0] == "Total: 2"
    assert app.button(key="summary_Completed").proto.type == "primary"
    assert app.button(key="summary_all").proto.type == "secondary"


def test_clear_resets_filters(app, sheet):
    app.run()
    app.button(key="summary_Completed").click().run()
    assert "clear_filters" in _button_keys(app)

    app.button(key="clear_filters").click().run()

    assert not app.exception
    assert [c.value for c in app.caption] == ["Showing 2 of 2 programs"]
    assert "clear_filters" not in _button_keys(app)
    assert app.button(key="summary_all").proto.type == "primary"
