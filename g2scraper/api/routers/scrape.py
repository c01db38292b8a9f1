"""Scrape endpoint.

Routes
------
POST /scrape    Body: {"url": "https://www.g2.com/products/<slug>/reviews"}
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from g2scraper.scraper.browser import is_product_url, scrape_reviews

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_URL_ERROR = "URL is required in the request body."
INVALID_URL_ERROR = "Please provide a valid G2 product URL."
SCRAPE_FAILED_ERROR = "Failed to scrape reviews."
UNKNOWN_FAILURE_DETAILS = "Unknown error occurred during scraping."


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    url: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    content: dict[str, Any] = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post("/scrape")
def scrape(body: Optional[ScrapeRequest] = None) -> Any:
    """Scrape the reviews of one G2 product page.

    Runs in FastAPI's thread pool, so every request drives its own browser.
    """
    url = body.url if body is not None else None
    if not url:
        return _error(400, MISSING_URL_ERROR)
    if not is_product_url(url):
        return _error(400, INVALID_URL_ERROR)

    try:
        result = scrape_reviews(url)
    except Exception as exc:
        logger.exception("API error while scraping %s", url)
        return _error(500, SCRAPE_FAILED_ERROR, str(exc) or UNKNOWN_FAILURE_DETAILS)

    return {"success": True, "data": result.to_dict()}
