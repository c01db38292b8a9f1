"""Scraper package — browser session & review extraction."""

from g2scraper.scraper.browser import browser_session, is_product_url, scrape_reviews
from g2scraper.scraper.extractor import extract_reviews
from g2scraper.scraper.models import ReviewEntry, ReviewerInfo, ScrapeResult

__all__ = [
    "browser_session",
    "scrape_reviews",
    "is_product_url",
    "extract_reviews",
    "ReviewEntry",
    "ReviewerInfo",
    "ScrapeResult",
]
