"""Run the API server: `taskapi` or `python -m taskapi`."""

import logging

import uvicorn

from taskapi.config import settings

logger = logging.getLogger("taskapi")


def main() -> None:
    from taskapi.main import app

    logger.info(f"Server running on http://localhost:{settings.PORT}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Health check: http://localhost:{settings.PORT}/health")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
