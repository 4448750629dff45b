"""
PDF Service entrypoint - runs uvicorn server.
"""

import logging

import uvicorn

from pdf_service.app import create_app
from pdf_service.config import get_settings

logger = logging.getLogger(__name__)

# uvicorn builds the one application instance from the factory
APP_FACTORY = f"{create_app.__module__}:{create_app.__name__}"


def main() -> None:
    """Run the PDF service."""
    settings = get_settings()
    base_url = f"http://{settings.host}:{settings.port}"

    logger.info(f"PDF Service running on {base_url} (backend={settings.pdf_backend})")
    logger.info(f"Health check: {base_url}/health")
    logger.info(f"Generate PDF: POST {base_url}/generate-pdf")

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
