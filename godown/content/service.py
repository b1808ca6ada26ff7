"""Content pipeline: resolve, classify and dispatch to exactly one renderer."""

from pathlib import Path
from typing import assert_never

from godown.content.classifier import classify
from godown.content.renderers import render_binary, render_markdown, render_text
from godown.content.resolver import README_NAME, PathResolver
from godown.core.logger import LogIcon, logger
from godown.models.content import Binary, Markdown, Media, MediaFile, RenderResult, Text


class ContentService:
    """Stateless per-request pipeline built once from startup configuration."""

    def __init__(self, root: Path, index_file: str = README_NAME) -> None:
        self._resolver = PathResolver(root, index_file=index_file)

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def render(self, request_path: str) -> RenderResult:
        """Render a request path; raises ContentNotFound when nothing can be served."""
        resolved = self._resolver.resolve(request_path)
        classification = classify(resolved)
        logger.info(
            "Resolved request",
            icon=LogIcon.DETECTION,
            path=request_path,
            file=str(resolved.path),
            kind=type(classification).__name__,
        )

        match classification:
            case Media(content_type=content_type):
                return MediaFile(path=resolved.path, content_type=content_type)
            case Markdown():
                return render_markdown(resolved)
            case Text():
                return render_text(resolved)
            case Binary():
                return render_binary(resolved)
            case _:
                assert_never(classification)
