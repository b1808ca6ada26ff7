"""Media extension table: extensions served verbatim and their MIME types."""

from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MEDIA_TYPES: dict[str, str] = {
    # Images
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
    # SVG
    ".svg": "image/svg+xml",
    # Videos
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".ogg": "video/ogg",
    ".avi": "video/x-msvideo",
    ".mov": "video/quicktime",
    ".mkv": "video/x-matroska",
    # Stylesheets
    ".css": "text/css",
}


def media_type_of(path: str | PurePath) -> str | None:
    """Return the MIME type when the path has a media extension, else None."""
    return MEDIA_TYPES.get(PurePath(path).suffix.lower())


def is_media(path: str | PurePath) -> bool:
    return media_type_of(path) is not None


def content_type_for(path: str | PurePath) -> str:
    """Return the Content-Type for a file, falling back to octet-stream."""
    return media_type_of(path) or DEFAULT_CONTENT_TYPE
