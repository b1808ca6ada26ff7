"""Request logging middleware."""

from robyn import Request

from godown.core.logger import LogIcon, logger
from godown.middlewares.base import BaseMiddleware


class RequestLogMiddleware(BaseMiddleware):
    """Logs method and path of every incoming request."""

    def before(self, request: Request) -> Request:
        logger.info("Request", icon=LogIcon.NETWORK, method=request.method, path=request.url.path)
        return request
