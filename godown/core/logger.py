"""structlog setup: icon-tagged events, pipe lines in debug mode and JSON otherwise."""

import logging
from enum import StrEnum

import orjson
import structlog
from beartype import beartype

from godown.core.settings import settings


class LoggerError(Exception):
    """Exception for logger related issues."""


class LogIcon(StrEnum):
    """Icon mappings for different log categories."""

    DEFAULT = "📋"

    # Status
    ERROR = "❌"
    WARNING = "⚠️"

    # Request lifecycle
    START = "🚀"
    DETECTION = "🔍"
    NOT_FOUND = "🕳️"
    NETWORK = "🌐"
    STREAMING = "📡"
    FORBIDDEN = "🚫"

    # Server pieces
    ADAPTER = "🔌"
    TEMPLATE = "🧩"
    FILE = "📄"
    STYLE = "🎨"


class BusinessRulesProcessor:
    """Normalize event messages before rendering.

    Events are upper-cased and capped at 80 characters. The ``icon`` kwarg must
    be a LogIcon and is shown in front of the event only in debug mode.
    """

    def __init__(self, debug: bool) -> None:
        self.debug = debug

    @beartype
    def __call__(self, logger, name: str, event_dict: dict) -> dict:
        """Transform event with uppercase, length limit, and optional icon."""
        try:
            event = str(event_dict.get("event", ""))[:80].upper()
            icon_enum = LogIcon(event_dict.pop("icon", LogIcon.DEFAULT))

            if self.debug:
                event = f"{icon_enum.value} {event}"

            event_dict["event"] = event
            return event_dict
        except ValueError as err:
            raise LoggerError("Wrong Icon chosen, please choose a valid LogIcon enum member") from err
        except Exception as ex:
            raise LoggerError(f"Error with extra kwargs passed to the logger: {ex}") from ex


def dev_pipeline_renderer(logger, name: str, event_dict: dict) -> str:
    """Render log events in human-readable format with pipe-separated fields."""
    reserved_keys = {"timestamp", "level", "event", "filename", "lineno"}

    timestamp = event_dict.get("timestamp", "")
    level = event_dict.get("level", "info").upper()
    event = event_dict.get("event", "")
    filename = event_dict.get("filename", "")
    lineno = event_dict.get("lineno", "")

    location = f"{filename}:{lineno}" if filename else ""

    extra_kwargs = " | ".join(
        f"{k}={v}" for k, v in event_dict.items() if k not in reserved_keys
    )

    parts = [timestamp, level, event, extra_kwargs, location]
    return " | ".join(filter(None, parts))


def _orjson_dumps(obj, **kwargs) -> str:
    return orjson.dumps(obj, **kwargs).decode()


def setup_logging(debug: bool, level: int = logging.INFO) -> None:
    """Configure structlog: pipe-separated lines in debug mode, JSON otherwise."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
            additional_ignores=["logger"]
        ),
        BusinessRulesProcessor(debug=debug),
    ]

    if debug:
        processors = shared_processors + [dev_pipeline_renderer]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(serializer=_orjson_dumps),
        ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


setup_logging(debug=settings.DEBUG)

logger = structlog.get_logger()
