import logging

import uvicorn

from settings import configure_logging, load_settings

logger = logging.getLogger(__name__)
APP_FACTORY = "api.main:create_app"


def main() -> None:
    settings = load_settings()
    configure_logging(settings)
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
