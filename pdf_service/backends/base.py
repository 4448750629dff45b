"""
Render backend interface.

A backend turns a composed HTML document into PDF bytes. Every render is
bounded by the configured deadline, and every failure reaches the caller
as a RenderError carrying the underlying message.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..config import PdfServiceSettings
from ..errors import RenderError
from ..models import PageLayout

logger = logging.getLogger(__name__)


class RenderBackend(ABC):
    """Strategy interface: render(markup, layout) -> PDF bytes."""

    # Registry key, e.g. "chromium"
    name: str = ""
    # Top margin used instead of the layout's when a logo is present
    logo_top_margin: str = ""

    def __init__(self, settings: PdfServiceSettings):
        self.settings = settings

    async def render(self, markup: str, layout: PageLayout) -> bytes:
        """
        Render a complete HTML document to PDF.

        Args:
            markup: Complete HTML document from the composer
            layout: Page size, margins and optional logo

        Returns:
            PDF bytes

        Raises:
            RenderError: launch/load/print failure or deadline expiry
        """
        timeout = self.settings.render_timeout_seconds
        logger.info(
            f"Starting {self.name} render "
            f"(page_size={layout.page_size.value}, logo={layout.logo is not None})"
        )

        try:
            pdf_bytes = await asyncio.wait_for(self._render(markup, layout), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"{self.name} render timed out after {timeout:g}s")
            raise RenderError(f"Rendering timed out after {timeout:g}s") from e
        except RenderError:
            raise
        except Exception as e:
            logger.error(f"{self.name} render failed: {str(e)}")
            raise RenderError(str(e) or type(e).__name__) from e

        logger.info(f"{self.name} render completed ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    @abstractmethod
    async def _render(self, markup: str, layout: PageLayout) -> bytes:
        """Backend-specific rendering; runs inside the render deadline."""

    def check_available(self) -> Optional[str]:
        """Describe why this backend cannot render, or None if it looks usable."""
        return None
