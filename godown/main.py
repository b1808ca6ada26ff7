"""godown - Markdown file server powered by Robyn."""

from robyn import Robyn
from robyn.argument_parser import Config

from godown.api.pages import create_router
from godown.content.service import ContentService
from godown.core.logger import LogIcon, logger
from godown.core.settings import Settings, load_settings
from godown.middlewares.access import RequestLogMiddleware
from godown.middlewares.base import MiddlewareHandler


def create_app(config: Settings) -> Robyn:
    """Build the Robyn app with configuration fixed at startup."""
    # /docs and /openapi.json belong to the served tree, not to Robyn
    robyn_config = Config()
    robyn_config.disable_openapi = True
    app = Robyn(__file__, config=robyn_config)

    service = ContentService(config.ROOT, index_file=config.INDEX)
    app.include_router(create_router(service, style_path=config.STYLE))

    # Middlewares
    middlewares = MiddlewareHandler(app)
    middlewares.register(RequestLogMiddleware())

    return app


def main(argv: list[str] | None = None) -> None:
    config = load_settings(argv)
    app = create_app(config)

    if config.STYLE is None:
        logger.info("Using embedded CSS", icon=LogIcon.STYLE)
    else:
        logger.info("Using custom CSS", icon=LogIcon.STYLE, path=str(config.STYLE))

    logger.info(
        f"Starting {config.API_NAME}",
        icon=LogIcon.START,
        host=config.HOST,
        port=config.PORT,
        version=config.API_VERSION,
    )
    logger.info("Serving", icon=LogIcon.FILE, root=str(config.ROOT.resolve()), index=config.INDEX, url=config.api_url)
    app.start(host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
