"""
wkhtmltopdf render backend.

Pipes the composed document into a wkhtmltopdf child process and collects
the PDF from its stdout. Much lighter than Chromium (~100MB RAM vs ~500MB)
but limited to older CSS (no advanced Flexbox/Grid) and no JavaScript.

When a logo is present it is repeated on every page through a running
header document written to a temporary file. That file is removed only
after the child process has exited.
"""

import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from ..composer import compose_running_header
from ..errors import RenderError
from ..models import Logo, Margins, PageLayout, PageSize
from .base import RenderBackend

logger = logging.getLogger(__name__)

FOOTER_TEXT = "Page [page] of [toPage]"


class WkhtmltopdfBackend(RenderBackend):
    """Static template + external renderer backend."""

    name = "wkhtmltopdf"
    logo_top_margin = "3cm"

    def build_command(
        self,
        page_size: PageSize,
        margins: Margins,
        header_path: Optional[str] = None,
    ) -> List[str]:
        """
        Build the wkhtmltopdf command line.

        The document is read from stdin and the PDF written to stdout.
        """
        cmd = [
            self.settings.wkhtmltopdf_path,
            "--quiet",
            "--page-size", page_size.value,
            "--margin-top", margins.top,
            "--margin-right", margins.right,
            "--margin-bottom", margins.bottom,
            "--margin-left", margins.left,
            "--encoding", "UTF-8",
            "--print-media-type",
            "--enable-local-file-access",
            "--footer-center", FOOTER_TEXT,
            "--footer-font-size", "10",
            "--footer-spacing", "5",
        ]

        if header_path:
            cmd.extend(["--header-html", Path(header_path).as_uri(), "--header-spacing", "5"])

        cmd.extend(["-", "-"])
        return cmd

    async def _render(self, markup: str, layout: PageLayout) -> bytes:
        margins = layout.effective_margins(self.logo_top_margin)
        header_path = None
        process = None

        try:
            if layout.logo is not None:
                header_path = self._write_running_header(layout.logo)

            cmd = self.build_command(layout.page_size, margins, header_path)
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate(markup.encode("utf-8"))
        finally:
            if process is not None and process.returncode is None:
                # Cancelled by the render deadline
                logger.warning("Killing unfinished wkhtmltopdf process")
                try:
                    process.kill()
                except ProcessLookupError:
                    pass
                await process.wait()
            if header_path is not None:
                _remove_file(header_path)

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise RenderError(f"wkhtmltopdf exited with code {process.returncode}: {detail}")

        if not stdout:
            raise RenderError("wkhtmltopdf produced no output")

        return stdout

    def _write_running_header(self, logo: Logo) -> str:
        """Write the per-page header document to a uniquely named temp file."""
        header_html = compose_running_header(logo.url, logo.position.value)
        fd, path = tempfile.mkstemp(prefix="header-", suffix=".html", dir=self.settings.temp_dir)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(header_html)
        logger.debug(f"Wrote running header to {path}")
        return path

    def check_available(self) -> Optional[str]:
        if shutil.which(self.settings.wkhtmltopdf_path) is None:
            return f"wkhtmltopdf executable not found: {self.settings.wkhtmltopdf_path}"
        return None


def _remove_file(path: str) -> None:
    try:
        os.remove(path)
        logger.debug(f"Removed running header {path}")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove running header {path}: {str(e)}")
