"""Renderers, one per content classification."""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from markupsafe import escape

from godown.content.errors import ContentNotFound
from godown.content.hexdump import MAX_DISPLAY_SIZE, format_bytes, format_hex_dump
from godown.content.markdown_renderer import markdown_to_html
from godown.core.logger import LogIcon, logger
from godown.models.content import RenderedPage, ResolvedPath

CHUNK_SIZE = 64 * 1024
BINARY_MARKER = " (binary)"

_TEXT_WRAPPER = '<pre style="white-space: pre-wrap; word-wrap: break-word;">{}</pre>'
_INFO_STYLE = (
    "margin-bottom: 20px; padding: 10px; background: var(--code-bg); "
    "border-radius: 5px; border: 1px solid var(--border-color);"
)


def _read(path: Path, request_path: str, limit: int = -1) -> bytes:
    try:
        with path.open("rb") as handle:
            return handle.read(limit)
    except OSError as ex:
        raise ContentNotFound(request_path, "unreadable") from ex


def render_markdown(resolved: ResolvedPath) -> RenderedPage:
    """Render a Markdown file through the Markdown engine."""
    source = _read(resolved.path, resolved.request.path)
    return RenderedPage(title=resolved.name, content=markdown_to_html(source))


def render_text(resolved: ResolvedPath) -> RenderedPage:
    """Escape a text file and wrap it in a whitespace-preserving block."""
    source = _read(resolved.path, resolved.request.path)
    text = source.decode("utf-8", errors="replace")
    return RenderedPage(title=resolved.name, content=_TEXT_WRAPPER.format(escape(text)))


def render_binary(resolved: ResolvedPath) -> RenderedPage:
    """Render the first 64 KiB of a binary file as a hex dump with a file info block."""
    try:
        with resolved.path.open("rb") as handle:
            size = os.fstat(handle.fileno()).st_size
            data = handle.read(MAX_DISPLAY_SIZE)
    except OSError as ex:
        raise ContentNotFound(resolved.request.path, "unreadable") from ex

    info = binary_info(resolved.name, size, len(data))
    return RenderedPage(title=resolved.name + BINARY_MARKER, content=info + format_hex_dump(data))


def binary_info(name: str, size: int, displayed: int) -> str:
    """File name, size and truncation notice shown above a hex dump."""
    notice = f" (showing first {format_bytes(displayed)})" if size > displayed else ""
    return (
        f'<div style="{_INFO_STYLE}">\n'
        f"<strong>File:</strong> {escape(name)}<br>\n"
        f"<strong>Size:</strong> {format_bytes(size)} bytes{notice}\n"
        "</div>\n"
    )


def stream_media(path: Path, request_path: str = "") -> Iterator[bytes]:
    """Open a media file and return a lazy iterator over its raw chunks.

    Open failures raise ContentNotFound here, before any byte is produced.
    The iterator owns the handle and closes it once exhausted or closed.
    Read failures after that are logged and end the stream early.
    """
    try:
        handle = path.open("rb")
    except OSError as ex:
        raise ContentNotFound(request_path or str(path), "cannot open media") from ex
    return _iter_chunks(handle, path)


def _iter_chunks(handle: BinaryIO, path: Path) -> Iterator[bytes]:
    try:
        while True:
            try:
                chunk = handle.read(CHUNK_SIZE)
            except OSError as ex:
                logger.error("Media stream aborted", icon=LogIcon.STREAMING, path=str(path), error=str(ex))
                return
            if not chunk:
                return
            yield chunk
    finally:
        handle.close()
