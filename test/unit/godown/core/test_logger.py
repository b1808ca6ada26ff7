"""Tests for log event processing."""

import orjson
import pytest
import structlog

from godown.core.logger import BusinessRulesProcessor, LogIcon, LoggerError, dev_pipeline_renderer, setup_logging
from godown.core.settings import settings


class TestBusinessRulesProcessor:
    """Tests for BusinessRulesProcessor."""

    def test_uppercases_and_truncates(self) -> None:
        """Verify events are upper-cased and capped at 80 characters."""
        event = BusinessRulesProcessor(debug=False)(None, "info", {"event": "x" * 100})
        assert event["event"] == "X" * 80

    def test_icon_prepended_in_debug(self) -> None:
        """Verify the icon prefixes the event in debug mode."""
        event = BusinessRulesProcessor(debug=True)(None, "info", {"event": "served", "icon": LogIcon.FILE})
        assert event["event"] == f"{LogIcon.FILE.value} SERVED"
        assert "icon" not in event

    def test_invalid_icon_rejected(self) -> None:
        """Verify unknown icons raise LoggerError."""
        with pytest.raises(LoggerError):
            BusinessRulesProcessor(debug=True)(None, "info", {"event": "x", "icon": "nope"})


def test_dev_renderer_joins_fields() -> None:
    """Verify the dev renderer emits pipe-separated fields."""
    line = dev_pipeline_renderer(
        None, "info", {"timestamp": "t", "level": "info", "event": "E", "path": "/a", "filename": "f.py", "lineno": 3}
    )
    assert line == "t | INFO | E | path=/a | f.py:3"


class TestSetupLogging:
    """Tests for setup_logging renderer selection."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        setup_logging(debug=settings.DEBUG)

    def test_debug_uses_pipe_renderer(self) -> None:
        """Verify debug mode renders human-readable lines."""
        setup_logging(debug=True)
        assert structlog.get_config()["processors"][-1] is dev_pipeline_renderer

    def test_production_renders_json(self) -> None:
        """Verify non-debug mode renders events as JSON."""
        setup_logging(debug=False)
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)
        line = renderer(None, "info", {"event": "SERVED", "path": "/a"})
        assert orjson.loads(line) == {"event": "SERVED", "path": "/a"}
