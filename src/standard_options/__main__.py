"""
Application entry point.

Run with: python -m standard_options
"""

import uvicorn

from .api.app import create_app
from .config import configure_logging, get_settings


def main() -> None:
    """Start the FastAPI application server."""
    settings = get_settings()
    configure_logging(settings)

    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
