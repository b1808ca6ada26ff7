"""Content and stylesheet endpoints."""

import asyncio
from pathlib import Path
from urllib.parse import unquote

from robyn import Request, Response, status_codes

from godown.content.service import ContentService
from godown.content.stylesheet import load_stylesheet
from godown.core.router import Router
from godown.models.content import STYLESHEET_PATH, RenderResult

CSS_CONTENT_TYPE = "text/css; charset=utf-8"


def create_router(service: ContentService, style_path: Path | None = None) -> Router:
    """Build the page router around a content service configured at startup."""
    router = Router()

    @router.get(STYLESHEET_PATH)
    async def stylesheet() -> Response:
        css = await asyncio.to_thread(load_stylesheet, style_path)
        return Response(
            status_code=status_codes.HTTP_200_OK,
            headers={"content-type": CSS_CONTENT_TYPE},
            description=css,
        )

    @router.get("/")
    async def index() -> RenderResult:
        return await asyncio.to_thread(service.render, "/")

    @router.get("/*path")
    async def content(request: Request) -> RenderResult:
        return await asyncio.to_thread(service.render, unquote(request.url.path))

    return router
