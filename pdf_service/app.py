"""
PDF Service - FastAPI application for PDF generation.

Converts an HTML fragment (plus optional CSS and logo) into a paginated PDF
using the configured render backend. The renderer is started per request
and torn down before the response is sent.
"""

import asyncio
import logging
from contextlib import asynccontextmanager, nullcontext
from typing import AsyncIterator, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from . import __version__
from .backends import RenderBackend, get_backend
from .composer import compose
from .config import PdfServiceSettings, get_settings
from .middleware import BodySizeLimitMiddleware
from .models import GeneratePdfRequest, HealthResponse

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the selected backend and warn early if it cannot render."""
    renderer: RenderBackend = app.state.renderer
    logger.info(f"PDF Service starting - backend={renderer.name}")

    problem = renderer.check_available()
    if problem:
        logger.warning(f"{problem} - PDF generation will fail until this is resolved")

    yield

    logger.info("PDF Service stopped")


# ============================================================================
# Health Check Endpoint
# ============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check; independent of renderer state."""
    return HealthResponse()


# ============================================================================
# PDF Generation Endpoint
# ============================================================================

@router.post("/generate-pdf")
async def generate_pdf(payload: GeneratePdfRequest, request: Request) -> Response:
    """
    HTML/CSS (+ optional logo) to PDF endpoint.

    Returns:
        PDF bytes with explicit Content-Length, 400 when html is missing,
        500 with {error, message} when composition or rendering fails
    """
    if not payload.html:
        return JSONResponse(status_code=400, content={"error": "HTML is required"})

    state = request.app.state
    renderer: RenderBackend = state.renderer
    logger.info(f"Received PDF generation request (logo={bool(payload.logoUrl)})")

    try:
        markup = compose(payload.html, payload.css, payload.logoUrl, payload.logoPosition)
        async with state.render_slot or nullcontext():
            pdf_bytes = await renderer.render(markup, payload.page_layout())
    except Exception as e:
        logger.exception(f"PDF generation failed: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to generate PDF",
                "message": str(e) or "Unknown error",
            },
        )

    logger.info(f"PDF generated, sending {len(pdf_bytes)} bytes")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Length": str(len(pdf_bytes))},
    )


# ============================================================================
# Application Factory
# ============================================================================

def create_app(settings: Optional[PdfServiceSettings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Optional settings override (useful for testing)
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="PDF Service",
        version=__version__,
        description="HTML to PDF generation with on-demand Chromium or wkhtmltopdf",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.renderer = get_backend(settings)
    app.state.render_slot = (
        asyncio.Semaphore(settings.max_concurrent_renders)
        if settings.max_concurrent_renders
        else None
    )

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    # Permissive CORS: any origin may call the service (outermost middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app
