"""
Render backends and the registry that selects one from configuration.
"""

from typing import Dict, Type

from ..config import PdfServiceSettings
from .base import RenderBackend
from .chromium import ChromiumBackend
from .wkhtmltopdf import WkhtmltopdfBackend

BACKENDS: Dict[str, Type[RenderBackend]] = {
    ChromiumBackend.name: ChromiumBackend,
    WkhtmltopdfBackend.name: WkhtmltopdfBackend,
}


def get_backend(settings: PdfServiceSettings) -> RenderBackend:
    """Instantiate the backend named by settings.pdf_backend."""
    try:
        backend_cls = BACKENDS[settings.pdf_backend]
    except KeyError:
        raise ValueError(
            f"Unknown PDF backend '{settings.pdf_backend}'. Known: {', '.join(sorted(BACKENDS))}"
        )
    return backend_cls(settings)


__all__ = ["BACKENDS", "ChromiumBackend", "RenderBackend", "WkhtmltopdfBackend", "get_backend"]
