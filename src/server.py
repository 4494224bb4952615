import logging
import sys

import uvicorn

from src.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    if settings.SERVERPORT is None:
        logger.critical("SERVERPORT env is not set")
        sys.exit(1)

    logger.info(f"Server is running on {settings.HOST}:{settings.SERVERPORT}")
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.SERVERPORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
