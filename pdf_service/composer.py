"""
Document composer for PDF generation.

Builds the complete HTML document handed to a render backend:
- default stylesheet followed by caller CSS (later rules win)
- optional logo header block sized and aligned per LogoPosition
- caller content wrapped in <main>, passed through verbatim
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from .models import LogoPosition

logger = logging.getLogger(__name__)

DEFAULT_STYLESHEET_PATH = Path(__file__).parent / "static" / "styles.css"

_env = Environment(
    loader=PackageLoader("pdf_service", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class LogoStyle:
    align: str
    width: str
    max_height: str


def logo_style(position: LogoPosition) -> LogoStyle:
    """
    Size and alignment of the in-body logo block.

    Example:
        >>> logo_style(LogoPosition.FULL_WIDTH)
        LogoStyle(align='center', width='100%', max_height='80px')
    """
    if position is LogoPosition.FULL_WIDTH:
        return LogoStyle(align="center", width="100%", max_height="80px")
    return LogoStyle(align=position.align, width="120px", max_height="60px")


@lru_cache(maxsize=1)
def load_default_stylesheet() -> str:
    """Read the bundled stylesheet once; a missing file counts as empty."""
    try:
        return DEFAULT_STYLESHEET_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning(f"Default stylesheet not found at {DEFAULT_STYLESHEET_PATH}, using none")
        return ""


def merge_css(css: Optional[str]) -> str:
    """Default stylesheet, a newline, then the caller's CSS."""
    return f"{load_default_stylesheet()}\n{css or ''}"


def compose(
    content: str,
    css: Optional[str] = None,
    logo_url: Optional[str] = None,
    logo_position: Optional[str] = None,
) -> str:
    """
    Build the complete HTML document for PDF rendering.

    Args:
        content: HTML body fragment (not sanitised)
        css: Optional caller CSS appended after the default stylesheet
        logo_url: Optional logo image URL; no header block without it
        logo_position: LEFT, CENTER, RIGHT or FULL_WIDTH (unknown -> LEFT)

    Returns:
        Complete HTML document string
    """
    position = LogoPosition.parse(logo_position)
    template = _env.get_template("document.html")
    return template.render(
        content=content,
        css=merge_css(css),
        logo_url=logo_url or None,
        logo_position=position.align,
        logo=logo_style(position),
    )


def compose_running_header(logo_url: str, logo_position: Optional[str] = None) -> str:
    """
    Build the header-only document repeated at the top of every page.

    Used by backends that take the page header as a separate document.
    The header logo is 120px wide for every position; FULL_WIDTH only centres it.
    """
    position = LogoPosition.parse(logo_position)
    return _env.get_template("header.html").render(
        logo_url=logo_url,
        logo_position=position.align,
    )
