"""Router converting handler results and content errors into Robyn responses."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from robyn import Headers, Request, Response, StreamingResponse, SubRouter, status_codes
from robyn.robyn import HttpMethod

from godown.content.errors import ContentNotFound, GodownError, InternalRenderError
from godown.content.renderers import stream_media
from godown.core.logger import LogIcon, logger
from godown.core.template import PageTemplate, page_template
from godown.models.content import MediaFile, RenderedPage

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
NOT_FOUND_BODY = "404 page not found\n"
INTERNAL_ERROR_BODY = "Internal Server Error\n"


def parse_response(result: Any, template: PageTemplate = page_template) -> Response | StreamingResponse:
    """Convert handler result to Response."""
    match result:
        case Response():
            return result
        case RenderedPage():
            return Response(
                status_code=status_codes.HTTP_200_OK,
                headers={"content-type": HTML_CONTENT_TYPE},
                description=template.render(result),
            )
        case MediaFile(path=path, content_type=content_type):
            # Opened here so a missing file is a 404 before the stream starts
            chunks = stream_media(path)
            return StreamingResponse(
                content=chunks,
                status_code=status_codes.HTTP_200_OK,
                headers=Headers({"content-type": content_type}),
                media_type=content_type,
            )
        case _:
            return Response(
                status_code=status_codes.HTTP_200_OK,
                headers={"content-type": TEXT_CONTENT_TYPE},
                description=str(result),
            )


def parse_error(ex: GodownError, path: str = "") -> Response:
    """Convert a content error to a terminal response, leaking no detail."""
    match ex:
        case ContentNotFound():
            logger.info("Not found", icon=LogIcon.NOT_FOUND, path=path or ex.path, reason=ex.reason)
            return Response(
                status_code=status_codes.HTTP_404_NOT_FOUND,
                headers={"content-type": TEXT_CONTENT_TYPE},
                description=NOT_FOUND_BODY,
            )
        case InternalRenderError():
            logger.error("Page render failed", icon=LogIcon.TEMPLATE, path=path, error=str(ex))
        case _:
            logger.error("Request failed", icon=LogIcon.ERROR, path=path, error=str(ex))
    return Response(
        status_code=status_codes.HTTP_500_INTERNAL_SERVER_ERROR,
        headers={"content-type": TEXT_CONTENT_TYPE},
        description=INTERNAL_ERROR_BODY,
    )


async def run_handler(
    handler: Callable[..., Awaitable[Any]], request: Request, /, **kwargs
) -> Response | StreamingResponse:
    """Await a handler and map its result or domain error to a Response."""
    path = getattr(getattr(request, "url", None), "path", "")
    try:
        result = await handler(**kwargs)
        return await asyncio.to_thread(parse_response, result)
    except GodownError as ex:
        return parse_error(ex, path)


HTTP_METHODS = (HttpMethod.GET,)


def _create_method_wrapper(original_method: Callable) -> Callable:
    @wraps(original_method)
    def method_wrapper(*args, **kwargs) -> Callable:
        decorator = original_method(*args, **kwargs)

        def handler_decorator(handler: Callable) -> Callable:
            sig = inspect.signature(handler)
            has_request_param = "request" in sig.parameters

            @wraps(handler)
            async def wrapped_handler(request: Request):
                # Pass request to handler only if it declared it
                h_kwargs = {"request": request} if has_request_param else {}
                return await run_handler(handler, request, **h_kwargs)

            # Robyn injects by signature: expose only the request
            params = [inspect.Parameter("request", inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=Request)]
            wrapped_handler.__signature__ = sig.replace(parameters=params, return_annotation=Response)  # type: ignore[attr-defined]
            return decorator(wrapped_handler)

        return handler_decorator

    return method_wrapper


class Router(SubRouter):
    """SubRouter whose handlers return pages or media, and raise content errors."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._wrap_methods()

    def _wrap_methods(self) -> None:
        """Wrap HTTP methods with response and error mapping."""
        for method in HTTP_METHODS:
            method_name = str(method).split(".")[-1].lower()
            if hasattr(self, method_name):
                original_method = getattr(self, method_name)
                setattr(self, method_name, _create_method_wrapper(original_method))
