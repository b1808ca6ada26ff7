"""Hex dump formatting for binary files: offset, 16 hex bytes, ASCII column."""

from collections.abc import Iterator

from beartype import beartype
from markupsafe import escape

from godown.models.content import HexDumpLine

BYTES_PER_LINE = 16
MAX_DISPLAY_SIZE = 64 * 1024

_CONTAINER_STYLE = "font-family: 'Courier New', monospace; font-size: 12px;"
_HEADER_STYLE = "color: #666; margin-bottom: 8px; white-space: pre;"
_LINE_STYLE = "white-space: pre;"
_OFFSET_STYLE = "color: #0366d6;"

HEADER = (
    f'<div style="{_HEADER_STYLE}">'
    "Offset    00 01 02 03 04 05 06 07 08 09 0A 0B 0C 0D 0E 0F  ASCII<br>"
    "--------  -----------------------------------------------  ----------------"
    "</div>"
)


def iter_hex_lines(data: bytes) -> Iterator[HexDumpLine]:
    """Yield dump lines lazily, in offset order."""
    for offset in range(0, len(data), BYTES_PER_LINE):
        yield HexDumpLine(offset=offset, values=data[offset : offset + BYTES_PER_LINE])


def format_hex_line(line: HexDumpLine) -> str:
    """Render one line; short lines are padded so the ASCII column stays aligned."""
    hex_part = "".join(f"{b:02x} " for b in line.values)
    padding = "   " * (BYTES_PER_LINE - len(line.values))
    ascii_part = "".join(str(escape(char)) for char in line.characters)
    return (
        f'<div style="{_LINE_STYLE}">'
        f'<span style="{_OFFSET_STYLE}">{line.offset:08x}</span>  '
        f"{hex_part}{padding} {ascii_part}</div>"
    )


@beartype
def format_hex_dump(data: bytes) -> str:
    """Format a byte buffer as an HTML hex dump fragment."""
    lines = [f'<div style="{_CONTAINER_STYLE}">', HEADER]
    lines.extend(format_hex_line(line) for line in iter_hex_lines(data))
    lines.append("</div>")
    return "\n".join(lines)


def format_bytes(size: int) -> str:
    """Format a byte count: plain below 1 KiB, else one decimal with a unit."""
    unit = 1024
    if size < unit:
        return str(size)
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"
