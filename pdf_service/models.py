"""
Request models and page layout types for the PDF service.

The request body is validated with Pydantic; the layout handed to the
render backends is a set of small immutable dataclasses.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogoPosition(str, Enum):
    """Where the logo sits in the document header."""

    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"
    FULL_WIDTH = "FULL_WIDTH"

    @classmethod
    def parse(cls, value: Optional[str]) -> "LogoPosition":
        """Parse a position, falling back to LEFT for missing or unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.LEFT

    @property
    def align(self) -> str:
        """Lowercase CSS text-align keyword for this position."""
        if self is LogoPosition.FULL_WIDTH:
            return "center"
        return self.value.lower()


class PageSize(str, Enum):
    A4 = "A4"
    LETTER = "Letter"


@dataclass(frozen=True)
class Margins:
    """Page margins, each a CSS length with unit."""

    top: str = "2.12cm"
    right: str = "1.5cm"
    bottom: str = "2.12cm"
    left: str = "1.5cm"

    def with_top(self, top: str) -> "Margins":
        return replace(self, top=top)

    def as_dict(self) -> dict:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


@dataclass(frozen=True)
class Logo:
    url: str
    position: LogoPosition = LogoPosition.LEFT


@dataclass(frozen=True)
class PageLayout:
    """
    Page geometry for one render.

    When a logo is present each backend enlarges the top margin to its own
    fixed value to reserve header space; callers never choose that value.
    """

    page_size: PageSize = PageSize.A4
    margins: Margins = Margins()
    logo: Optional[Logo] = None

    def effective_margins(self, logo_top_margin: str) -> Margins:
        """Margins to print with, given the backend's logo top margin."""
        if self.logo is None:
            return self.margins
        return self.margins.with_top(logo_top_margin)


class GeneratePdfRequest(BaseModel):
    """HTML/CSS (+ optional logo) to PDF request."""

    model_config = ConfigDict(extra="ignore")

    html: Optional[str] = Field(None, description="HTML body content to render")
    css: Optional[str] = Field(None, description="Additional CSS, applied after the default stylesheet")
    logoUrl: Optional[str] = Field(None, description="Logo image URL (not validated)")
    logoPosition: Optional[str] = Field(
        None,
        description="Logo position: LEFT, CENTER, RIGHT or FULL_WIDTH (unknown values behave as LEFT)"
    )

    @field_validator("css", "logoUrl", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        """Pass any value through as text; falsy values count as absent."""
        if not v:
            return None
        return v if isinstance(v, str) else str(v)

    @field_validator("logoPosition", mode="before")
    @classmethod
    def ignore_non_text_position(cls, v: Any) -> Optional[str]:
        """Non-text positions are dropped, so they render as LEFT."""
        return v if isinstance(v, str) else None

    def page_layout(self) -> PageLayout:
        """Fixed A4 layout used by /generate-pdf, carrying the logo if present."""
        logo = None
        if self.logoUrl:
            logo = Logo(url=self.logoUrl, position=LogoPosition.parse(self.logoPosition))
        return PageLayout(page_size=PageSize.A4, margins=Margins(), logo=logo)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    service: str = "pdf-service"
