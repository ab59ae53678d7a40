"""
Tests for structured logging helpers.
"""

import pytest
import structlog

from skillmatcher.logging import LogContext, bind_context, clear_context, get_logger, log_timing


class _RecordingLogger:
    def __init__(self):
        self.events = []

    def info(self, event, **kw):
        self.events.append(("info", event, kw))

    def error(self, event, **kw):
        self.events.append(("error", event, kw))


class TestLogContext:
    """Tests for temporary log context."""

    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_binds_and_unbinds(self):
        """Test context is present inside the block and gone after it."""
        with LogContext(project_id="p-1"):
            assert structlog.contextvars.get_contextvars()["project_id"] == "p-1"

        assert "project_id" not in structlog.contextvars.get_contextvars()

    def test_unbinds_on_exception(self):
        """Test context is removed even when the block raises."""
        with pytest.raises(RuntimeError):
            with LogContext(user_id="u-1"):
                raise RuntimeError("boom")

        assert "user_id" not in structlog.contextvars.get_contextvars()

    def test_keeps_outer_context(self):
        """Test unrelated context survives the block."""
        bind_context(request_id="r-1")
        with LogContext(project_id="p-1"):
            pass

        assert structlog.contextvars.get_contextvars() == {"request_id": "r-1"}


class TestLogTiming:
    """Tests for the timing decorator."""

    def test_logs_completion(self):
        """Test a successful call logs operation_complete."""
        recorder = _RecordingLogger()

        @log_timing("unit_op", logger=recorder)
        def work(x):
            return x * 2

        assert work(21) == 42
        level, event, fields = recorder.events[0]
        assert (level, event) == ("info", "operation_complete")
        assert fields["operation"] == "unit_op"
        assert fields["duration_seconds"] >= 0

    def test_logs_failure_and_reraises(self):
        """Test a failing call logs operation_failed and propagates the error."""
        recorder = _RecordingLogger()

        @log_timing("unit_op", logger=recorder)
        def work():
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            work()

        level, event, fields = recorder.events[0]
        assert (level, event) == ("error", "operation_failed")
        assert fields["error_type"] == "ValueError"

    def test_preserves_function_metadata(self):
        """Test the wrapper keeps the wrapped function's name."""

        @log_timing("unit_op")
        def named_function():
            return None

        assert named_function.__name__ == "named_function"


def test_get_logger_returns_bound_logger():
    logger = get_logger("tests")

    assert hasattr(logger, "info")
    assert hasattr(logger, "bind")
