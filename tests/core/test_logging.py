"""Tests for structured logging configuration."""

import json
import logging

import pytest
import structlog

from promise_recorder.contracts import PromiseId, UnknownPromiseError
from promise_recorder.core.config import LoggingSettings
from promise_recorder.core.logging import configure_from_settings, configure_logging
from promise_recorder.core.tracker import PromiseTracker
from promise_recorder.testing import make_call


def _json_events(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_records_scheduling(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Scheduling emits promise_scheduled at DEBUG."""
        configure_logging(json_output=True, level="DEBUG")
        tracker = PromiseTracker()
        tracker.promise_create_call(make_call())

        events = _json_events(capsys.readouterr().out)
        scheduled = [e for e in events if e["event"] == "promise_scheduled"]
        assert len(scheduled) == 1
        assert scheduled[0]["promise_id"] == 0
        assert scheduled[0]["kind"] == "CreateEntry"
        assert scheduled[0]["level"] == "debug"
        assert "timestamp" in scheduled[0]

    def test_consumption_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="DEBUG")
        tracker = PromiseTracker()
        promise_id = tracker.promise_create_call(make_call())
        tracker.take_promise(promise_id)

        events = _json_events(capsys.readouterr().out)
        assert any(e["event"] == "promise_consumed" and e["promise_id"] == 0 for e in events)

    def test_info_level_hides_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Scheduling is silent at INFO."""
        configure_logging(json_output=True, level="INFO")
        PromiseTracker().promise_create_call(make_call())
        assert capsys.readouterr().out == ""

    def test_resolution_failure_logged_as_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")
        with pytest.raises(UnknownPromiseError):
            PromiseTracker().take_promise(PromiseId(3))

        events = _json_events(capsys.readouterr().out)
        assert len(events) == 1
        assert events[0]["event"] == "promise_resolution_failed"
        assert events[0]["level"] == "warning"
        assert events[0]["missing_id"] == 3

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console renderer writes human-readable lines."""
        configure_logging(json_output=False, level="DEBUG")
        PromiseTracker().promise_return(PromiseId(1))
        out = capsys.readouterr().out
        assert "promise_returned" in out
        assert "promise_id=1" in out

    def test_stdlib_loggers_share_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """stdlib logging goes through the same JSON renderer."""
        configure_logging(json_output=True, level="INFO")
        logging.getLogger("some.test").info("stdlib message")
        events = _json_events(capsys.readouterr().out)
        assert events[0]["event"] == "stdlib message"
        assert events[0]["level"] == "info"


class TestSettingsIntegration:
    """Tests for configure_from_settings."""

    def test_configure_from_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_from_settings(LoggingSettings(level="WARNING", json_output=True))
        structlog.get_logger("tests").info("hidden")
        structlog.get_logger("tests").warning("shown", detail="x")

        events = _json_events(capsys.readouterr().out)
        assert [e["event"] for e in events] == ["shown"]
        assert events[0]["detail"] == "x"
