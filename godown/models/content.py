"""Core models for content resolution, classification and rendering."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

STYLESHEET_PATH = "/__godown_style.css"


class Resolution(StrEnum):
    """How a request path was mapped to a file."""

    AS_IS = "as_is"
    MARKDOWN = "markdown"
    README = "readme"


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """Request path (percent-decoded, not yet cleaned) and its resolved file."""

    path: str
    resolved: str = ""


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """Concrete file a request path resolved to."""

    request: RenderRequest
    path: Path
    resolution: Resolution

    @property
    def name(self) -> str:
        return self.path.name


# -----------------------------------------------------------------------------
# Classification variants
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Markdown:
    """Rendered through the Markdown engine."""


@dataclass(frozen=True, slots=True)
class Media:
    """Streamed verbatim with its MIME type."""

    content_type: str


@dataclass(frozen=True, slots=True)
class Text:
    """Escaped and wrapped in a preformatted block."""


@dataclass(frozen=True, slots=True)
class Binary:
    """Shown as a hex dump."""


type Classification = Markdown | Media | Text | Binary


# -----------------------------------------------------------------------------
# Rendering outputs
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class HexDumpLine:
    """One line of a hex dump: offset, up to 16 byte values and their ASCII view."""

    offset: int
    values: bytes

    @property
    def characters(self) -> str:
        return "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in self.values)


class RenderedPage(BaseModel):
    """HTML page content ready to be framed by the page template."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    stylesheet: str = STYLESHEET_PATH


@dataclass(frozen=True, slots=True)
class MediaFile:
    """Media file to stream verbatim."""

    path: Path
    content_type: str


type RenderResult = RenderedPage | MediaFile
