"""Base middleware architecture for Robyn applications."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from robyn import Request, Response, Robyn

from godown.core.logger import LogIcon, logger


class BaseMiddleware(ABC):
    """Abstract base class for middlewares run before request handling.

    Without explicit endpoints the hook is registered globally, so it also
    covers catch-all routes and routes mounted later.
    """

    endpoints: frozenset[str]

    def __init__(self, endpoints: frozenset[str] | list[str] | None = None) -> None:
        self.endpoints = frozenset(endpoints) if endpoints else frozenset()

    @abstractmethod
    def before(self, request: Request) -> Request | Response:
        """Called before request handling. Return Request to continue or Response to short-circuit."""


class MiddlewareHandler:
    """Manages middleware registration for a Robyn application."""

    def __init__(self, app: Robyn) -> None:
        self._app = app
        self._middlewares: list[BaseMiddleware] = []

    @property
    def middlewares(self) -> list[BaseMiddleware]:
        return self._middlewares

    def register(self, middleware: BaseMiddleware) -> "MiddlewareHandler":
        """Register a middleware instance. Returns self for chaining."""
        self._middlewares.append(middleware)
        self._apply_middleware(middleware)
        logger.info(f"Registered middleware: {middleware.__class__.__name__}", icon=LogIcon.ADAPTER)
        return self

    def _apply_middleware(self, middleware: BaseMiddleware) -> None:
        """Apply middleware to its endpoints, or to every route when it names none."""
        if not middleware.endpoints:
            self._register_before(None, middleware.before)
            return

        for endpoint in sorted(middleware.endpoints):
            self._register_before(endpoint, middleware.before)

    def _register_before(self, endpoint: str | None, handler: Callable) -> None:
        """Register a before_request handler; None registers it globally."""
        @self._app.before_request(endpoint)
        async def before_wrapper(request: Request) -> Request | Response:
            return handler(request)
