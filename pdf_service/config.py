"""
PDF Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
The settings object is immutable and is handed to the render backends by reference.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Backends known to the registry in pdf_service.backends
KNOWN_BACKENDS = ("chromium", "wkhtmltopdf")

# Launch flags for a containerized Chromium (no setuid sandbox, small /dev/shm)
CHROMIUM_LAUNCH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
)


class PdfServiceSettings(BaseSettings):
    """
    PDF service configuration with validation.

    All settings can be overridden via environment variables
    (exact, case-insensitive names: PORT, PDF_BACKEND, ...).
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    # === Server ===
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, ge=1, le=65535, description="Listen port")
    log_level: str = Field(default="INFO", description="Root log level")

    # === Request limits ===
    max_body_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        description="Maximum accepted request body size in bytes (default 10 MB)"
    )

    # === Rendering ===
    pdf_backend: str = Field(
        default="wkhtmltopdf",
        description="Render backend: 'chromium' or 'wkhtmltopdf'"
    )
    render_timeout_seconds: float = Field(
        default=60.0,
        ge=1,
        le=600,
        description="Deadline for a single render in seconds (1-600)"
    )
    max_concurrent_renders: Optional[int] = Field(
        default=None,
        ge=1,
        le=50,
        description="Optional bound on concurrent renders; unset means unbounded"
    )

    # === Chromium backend ===
    chromium_executable_path: Optional[str] = Field(
        default=None,
        description="Chromium binary to launch instead of the Playwright-managed one"
    )
    chromium_headless: bool = Field(default=True, description="Launch Chromium headless")

    # === wkhtmltopdf backend ===
    wkhtmltopdf_path: str = Field(
        default="wkhtmltopdf",
        description="wkhtmltopdf executable name or absolute path"
    )
    temp_dir: Optional[str] = Field(
        default=None,
        description="Directory for running-header files (system temp dir if unset)"
    )

    @field_validator("pdf_backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate the backend is one the registry knows."""
        v_lower = v.strip().lower()
        if v_lower not in KNOWN_BACKENDS:
            raise ValueError(f"pdf_backend must be one of: {', '.join(KNOWN_BACKENDS)}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.strip().upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(allowed))}")
        return v_upper

    @property
    def render_timeout_ms(self) -> float:
        """Render deadline in milliseconds (Playwright's unit)."""
        return self.render_timeout_seconds * 1000


@lru_cache()
def get_settings() -> PdfServiceSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for performance.
    Use this function to access configuration throughout the app.
    """
    return PdfServiceSettings()
