"""Content classification: which renderer handles a resolved file."""

import codecs
from pathlib import Path

from godown.content.media_types import media_type_of
from godown.models.content import Binary, Classification, Markdown, Media, ResolvedPath, Resolution, Text

SNIFF_SIZE = 512
ALLOWED_CONTROL_BYTES = frozenset(b"\t\n\r")


def classify(resolved: ResolvedPath) -> Classification:
    """Pick the rendering strategy for a resolved file.

    Media extensions win, then anything reached through the `.md` fallbacks
    is Markdown, and everything else is sniffed as Text or Binary.
    """
    if content_type := media_type_of(resolved.path):
        return Media(content_type=content_type)
    if resolved.resolution in (Resolution.MARKDOWN, Resolution.README):
        return Markdown()
    return Text() if sniff_text(resolved.path) else Binary()


def sniff_text(path: Path) -> bool:
    """Return True if the first 512 bytes of the file look like UTF-8 text."""
    try:
        with path.open("rb") as handle:
            prefix = handle.read(SNIFF_SIZE)
    except OSError:
        return False
    return looks_like_text(prefix, truncated=len(prefix) == SNIFF_SIZE)


def looks_like_text(prefix: bytes, truncated: bool = False) -> bool:
    """Check a byte prefix for valid UTF-8 with no NUL or stray control bytes.

    When the prefix was cut from a longer file, a multi-byte sequence split by
    the cut is not held against it.
    """
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(prefix, final=not truncated)
    except UnicodeDecodeError:
        return False
    return not any(b < 0x20 and b not in ALLOWED_CONTROL_BYTES for b in prefix)
