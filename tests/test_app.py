"""Tests for the Streamlit page, driven through streamlit's AppTest harness."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from job_scout import config
from job_scout.schemas.agent_result import AgentResult
from job_scout.services import agent_service

APP_PATH = str(Path(__file__).resolve().parents[1] / "job_scout" / "app.py")


def _job(title, link, location="Remote", hours_ago=2):
    posted = datetime.now(timezone.utc) - timedelta(hours=hours_ago)
    return {
        "title": title,
        "company": "Acme",
        "location": location,
        "postedDate": posted.isoformat(),
        "salaryRange": "Not specified",
        "link": link,
        "description": "Python services",
    }


def _success(*jobs):
    return AgentResult(success=True, response={"status": "success", "result": {"jobs": list(jobs)}})


class FakeTransport:
    """Records agent calls and answers with the current result."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    async def __call__(self, message, agent_id):
        self.calls.append((message, agent_id))
        return self.result


@pytest.fixture
def transport(monkeypatch, tmp_path):
    fake = FakeTransport(
        _success(
            _job("Backend Engineer", "https://jobs.example.com/1", location="Remote"),
            _job("Platform Engineer", "https://jobs.example.com/2", location="NYC"),
            _job("Data Engineer", "https://jobs.example.com/3", location="Berlin"),
        )
    )
    monkeypatch.setattr(agent_service, "call_agent", fake)
    monkeypatch.setattr(config, "STORAGE_PATH", tmp_path / "storage.json")
    st.cache_resource.clear()
    yield fake
    st.cache_resource.clear()


def _run_app() -> AppTest:
    at = AppTest.from_file(APP_PATH)
    at.run(timeout=10)
    assert not at.exception
    return at


def _footer(at: AppTest) -> str:
    return next(c.value for c in at.caption if "displayed" in c.value)


class TestFetching:
    def test_fetches_once_when_session_starts(self, transport):
        at = _run_app()
        assert len(transport.calls) == 1
        assert _footer(at) == "3 jobs displayed"

        at.run(timeout=10)
        assert len(transport.calls) == 1

    def test_refresh_button_fetches_again(self, transport):
        at = _run_app()
        at.button(key="refresh_btn").click().run(timeout=10)
        assert not at.exception
        assert len(transport.calls) == 2

    def test_failed_refresh_keeps_jobs_and_shows_error(self, transport):
        at = _run_app()
        transport.result = AgentResult(success=False, error="Agent unavailable")
        at.button(key="refresh_btn").click().run(timeout=10)

        assert [e.value for e in at.error] == ["Error: Agent unavailable"]
        assert _footer(at) == "3 jobs displayed"


class TestFilters:
    def test_keyword_narrows_list(self, transport):
        at = _run_app()
        at.text_input(key="search_keyword").input("platform").run(timeout=10)

        assert _footer(at) == "1 job displayed"
        assert "Showing 1 of 3 jobs" in [c.value for c in at.caption]

    def test_clear_filters_restores_full_list(self, transport):
        at = _run_app()
        at.text_input(key="search_keyword").input("platform").run(timeout=10)
        at.multiselect(key="location_filter").select("NYC").run(timeout=10)
        at.radio(key="date_filter").set_value("today").run(timeout=10)

        at.button(key="clear_filters").click().run(timeout=10)

        assert not at.exception
        assert at.text_input(key="search_keyword").value == ""
        assert at.multiselect(key="location_filter").value == []
        assert at.radio(key="date_filter").value == "all"
        assert _footer(at) == "3 jobs displayed"
        assert not [b for b in at.button if b.key == "clear_filters"]

    def test_vanished_location_dropped_after_refresh(self, transport):
        at = _run_app()
        at.multiselect(key="location_filter").select("NYC").run(timeout=10)
        assert _footer(at) == "1 job displayed"

        transport.result = _success(
            _job("Backend Engineer", "https://jobs.example.com/1", location="Remote"),
            _job("SRE", "https://jobs.example.com/4", location="Remote"),
        )
        at.button(key="refresh_btn").click().run(timeout=10)

        assert not at.exception
        assert at.session_state["location_filter"] == []
        assert _footer(at) == "2 jobs displayed"


class TestFavorites:
    def test_star_saved_and_visible_to_other_sessions(self, transport):
        first = _run_app()
        first.button(key="fav-https://jobs.example.com/1-0").click().run(timeout=10)
        assert not first.exception
        assert _footer(first) == "3 jobs displayed · 1 favorite saved"

        second = _run_app()
        assert _footer(second) == "3 jobs displayed · 1 favorite saved"
        assert second.button(key="fav-https://jobs.example.com/1-0").label == "★"
