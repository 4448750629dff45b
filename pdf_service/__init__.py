"""
PDF Service - Dedicated service for PDF generation.

Converts HTML fragments (plus optional CSS and logo) to PDF using either
an on-demand headless Chromium (Playwright) or wkhtmltopdf. The renderer
is started per request and released before the response is sent.
"""

__version__ = "0.1.0"
