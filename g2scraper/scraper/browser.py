"""Headless browser session and the end-to-end scrape routine."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from playwright.sync_api import Page, sync_playwright

from g2scraper.config import Settings, settings as default_settings
from g2scraper.scraper.extractor import REVIEW_CARD_SELECTOR, extract_reviews
from g2scraper.scraper.models import ScrapeResult

logger = logging.getLogger(__name__)

PRODUCT_PATH_MARKER = "g2.com/products/"


def is_product_url(url: str) -> bool:
    """Return ``True`` if *url* points at a G2 product page."""
    return PRODUCT_PATH_MARKER in url


@contextmanager
def browser_session(headless: bool = True) -> Iterator[Page]:
    """Launch a Chromium browser and yield a fresh page.

    The browser is closed on every exit path, including errors raised by the
    caller while the page is in use.
    """
    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=headless)
        try:
            yield browser.new_page()
        finally:
            browser.close()


def scrape_reviews(url: str, settings: Optional[Settings] = None) -> ScrapeResult:
    """Load the G2 product page at *url* and extract its visible reviews.

    Raises:
        playwright.sync_api.TimeoutError: If navigation or the review-card
            wait exceeds its configured timeout.
        playwright.sync_api.Error: On any other automation failure.
    """
    settings = settings or default_settings

    try:
        with browser_session(headless=settings.headless) as page:
            logger.info("Navigating to %s", url)
            page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=int(settings.navigation_timeout * 1000),
            )
            # At least one review card must render before extraction starts.
            page.wait_for_selector(
                REVIEW_CARD_SELECTOR,
                timeout=int(settings.review_wait_timeout * 1000),
            )
            return extract_reviews(page)
    except Exception:
        logger.exception("Playwright scraping error for %s", url)
        raise
