"""
Run the API under uvicorn. From the project root:

  python -m tasklist.server

HOST and PORT come from settings (env or .env).
"""

import logging
import sys

import uvicorn

from tasklist.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    """Serve tasklist.main:app until interrupted."""
    settings = get_settings()
    from tasklist.main import app

    logger.info("server_started", extra={"host": settings.HOST, "port": settings.PORT})
    try:
        uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
        return 0
    except Exception as e:
        logger.exception("Server failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
