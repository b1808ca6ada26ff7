"""Errors raised by the content pipeline."""


class GodownError(Exception):
    """Base exception for godown."""


class ContentNotFound(GodownError):
    """Request path cannot be served: unresolved, outside the root, or unreadable."""

    def __init__(self, path: str, reason: str = "not found") -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InternalRenderError(GodownError):
    """Page template failed to render."""
