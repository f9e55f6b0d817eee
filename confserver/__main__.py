"""Run the server with uvicorn: ``python -m confserver``."""

import logging

import uvicorn

from confserver.core.config import get_settings
from confserver.core.logging_setup import configure_logging

logger = logging.getLogger("confserver")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server is listening on port %s", settings.port)
    uvicorn.run(
        "confserver.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
