"""Run the HTTP service: ``python -m ixforge``."""

from __future__ import annotations

import logging

import uvicorn

from .api import create_app
from .config import load_settings

logger = logging.getLogger("ixforge")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
