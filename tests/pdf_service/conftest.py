"""
Pytest fixtures for PDF service tests.

Render backends are replaced with mocks so no Chromium or wkhtmltopdf
binary is needed.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from pdf_service.app import create_app
from pdf_service.backends import RenderBackend
from pdf_service.config import PdfServiceSettings


@pytest.fixture
def fake_pdf():
    """Minimal bytes that look like a PDF."""
    return b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"


@pytest.fixture
def settings(tmp_path):
    """Settings with a short render deadline and an isolated temp dir."""
    return PdfServiceSettings(
        pdf_backend="wkhtmltopdf",
        render_timeout_seconds=1,
        temp_dir=str(tmp_path),
    )


@pytest.fixture
def mock_renderer(fake_pdf):
    """Render backend mock returning fake PDF bytes."""
    renderer = MagicMock(spec=RenderBackend)
    renderer.name = "mock"
    renderer.render = AsyncMock(return_value=fake_pdf)
    renderer.check_available = MagicMock(return_value=None)
    return renderer


@pytest.fixture
def app(settings, mock_renderer):
    """Application wired to the mock renderer."""
    application = create_app(settings)
    application.state.renderer = mock_renderer
    return application


@pytest.fixture
def client(app):
    """Create test client for the PDF service."""
    return TestClient(app)
