"""
Chromium render backend (Playwright).

Launches a dedicated headless Chromium for every render and closes it
before returning, so nothing stays resident between requests. Costs more
memory and startup time than wkhtmltopdf but supports modern CSS.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from ..config import CHROMIUM_LAUNCH_ARGS, PdfServiceSettings
from ..errors import ResourceReleaseError
from ..models import PageLayout
from .base import RenderBackend

logger = logging.getLogger(__name__)

# Logo lives in the document body, so the page header stays empty
HEADER_TEMPLATE = "<div></div>"

FOOTER_TEMPLATE = """
<div style="font-size: 10px; text-align: center; width: 100%; color: #666666; margin-top: 10px;">
  Page <span class="pageNumber"></span> of <span class="totalPages"></span>
</div>
"""


async def _release_browser(browser) -> None:
    try:
        await browser.close()
    except Exception as e:
        raise ResourceReleaseError(f"Failed to close Chromium: {str(e)}") from e


@asynccontextmanager
async def launch_browser(settings: PdfServiceSettings) -> AsyncIterator:
    """
    Launch a Chromium owned by the caller's scope.

    The browser is closed on every exit path. A failure while closing is
    logged and suppressed so it cannot replace the render outcome.
    """
    # Import here to avoid loading Playwright when the backend is unused
    from playwright.async_api import async_playwright

    async with async_playwright() as p:
        logger.info("Launching Chromium...")
        browser = await p.chromium.launch(
            headless=settings.chromium_headless,
            args=list(CHROMIUM_LAUNCH_ARGS),
            executable_path=settings.chromium_executable_path,
        )
        try:
            yield browser
        finally:
            logger.info("Closing Chromium...")
            try:
                await _release_browser(browser)
            except ResourceReleaseError:
                logger.exception("Chromium release failed")
            else:
                logger.info("Chromium closed - resources released")


class ChromiumBackend(RenderBackend):
    """Full browser engine backend."""

    name = "chromium"
    logo_top_margin = "4.23cm"

    async def _render(self, markup: str, layout: PageLayout) -> bytes:
        margins = layout.effective_margins(self.logo_top_margin)

        async with launch_browser(self.settings) as browser:
            page = await browser.new_page()
            page.set_default_timeout(self.settings.render_timeout_ms)

            await page.set_content(markup, wait_until="networkidle")

            pdf_bytes = await page.pdf(
                format=layout.page_size.value,
                margin=margins.as_dict(),
                print_background=True,
                display_header_footer=True,
                header_template=HEADER_TEMPLATE,
                footer_template=FOOTER_TEMPLATE,
            )

        return pdf_bytes

    def check_available(self) -> Optional[str]:
        path = self.settings.chromium_executable_path
        if path and not os.path.exists(path):
            return f"Chromium executable not found at {path}"
        return None
