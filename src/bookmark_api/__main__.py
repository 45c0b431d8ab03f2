"""Entry point for running the Bookmarks API server."""
import logging

import uvicorn

from bookmark_api.core.config import get_settings


def main() -> None:
    """Configure logging and serve the API with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "bookmark_api.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
