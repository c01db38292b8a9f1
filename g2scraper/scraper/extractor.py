"""Review extraction: turns a rendered G2 product page into a :class:`ScrapeResult`.

Every selector below is coupled to G2's current markup.  When G2 changes its
HTML these are the only lines that need updating.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from playwright.sync_api import Error as PlaywrightError

from g2scraper.scraper.models import (
    NOT_AVAILABLE,
    UNKNOWN_PRODUCT,
    ReviewEntry,
    ReviewerInfo,
    ScrapeResult,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------
PRODUCT_NAME_SELECTOR = "h1.product-name"
REVIEW_CARD_SELECTOR = ".review-card"
REVIEW_TEXT_SELECTOR = ".review-content__text"
RATING_SELECTOR = ".rating-display__stars"
RATING_ATTRIBUTE = "data-rating"
REVIEW_DATE_SELECTOR = ".review-date"
REVIEWER_NAME_SELECTOR = ".reviewer__name"
REVIEWER_TITLE_SELECTOR = ".reviewer__title"
REVIEWER_COMPANY_SELECTOR = ".reviewer__company"
REVIEWER_INDUSTRY_SELECTOR = ".reviewer__industry"
REVIEWER_COMPANY_SIZE_SELECTOR = ".reviewer__company-size"

_TEXT_JS = "el => el.textContent.trim()"
_ATTR_JS = "(el, name) => el.getAttribute(name)"

# Leading decimal number, the same prefix a lenient float parse accepts.
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _text(scope: Any, selector: str, default: Optional[str] = None) -> Optional[str]:
    """Return the trimmed text of the first *selector* match under *scope*.

    *scope* is a Playwright ``Page`` or ``ElementHandle``.  Any automation
    error (no match, detached node, ...) yields *default*.
    """
    try:
        return scope.eval_on_selector(selector, _TEXT_JS)
    except PlaywrightError as exc:
        logger.debug("No text for %s (%s); using %r", selector, exc.message, default)
        return default


def _attribute(
    scope: Any, selector: str, name: str, default: Optional[str] = None
) -> Optional[str]:
    """Return attribute *name* of the first *selector* match, or *default*."""
    try:
        return scope.eval_on_selector(selector, _ATTR_JS, name)
    except PlaywrightError as exc:
        logger.debug("No %s on %s (%s); using %r", name, selector, exc.message, default)
        return default


def parse_rating(raw: str) -> Optional[float]:
    """Parse the leading number of *raw*, e.g. ``"4.5"`` or ``"4 stars"``.

    Returns ``None`` when *raw* does not start with a number.
    """
    match = _LEADING_FLOAT.match(raw.strip())
    if match is None:
        return None
    return float(match.group(0))


def extract_reviewer(card: Any) -> ReviewerInfo:
    """Collect the reviewer sub-fields of one review card."""
    return ReviewerInfo(
        name=_text(card, REVIEWER_NAME_SELECTOR),
        title=_text(card, REVIEWER_TITLE_SELECTOR),
        company=_text(card, REVIEWER_COMPANY_SELECTOR),
        industry=_text(card, REVIEWER_INDUSTRY_SELECTOR, NOT_AVAILABLE),
        company_size=_text(card, REVIEWER_COMPANY_SIZE_SELECTOR, NOT_AVAILABLE),
        review_date=_text(card, REVIEW_DATE_SELECTOR),
    )


def extract_entry(card: Any) -> Optional[ReviewEntry]:
    """Extract one review card, or ``None`` if it lacks text or a rating."""
    text = _text(card, REVIEW_TEXT_SELECTOR)
    rating_str = _attribute(card, RATING_SELECTOR, RATING_ATTRIBUTE)
    reviewer = extract_reviewer(card)

    if not (text and rating_str):
        return None
    return ReviewEntry(text=text, rating=parse_rating(rating_str), reviewer=reviewer)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_reviews(page: Any) -> ScrapeResult:
    """Extract the product name and every qualifying review card from *page*.

    *page* must already have rendered its review cards.  Cards are read once,
    in document order; field failures never abort a card or the run.
    """
    product_name = _text(page, PRODUCT_NAME_SELECTOR, UNKNOWN_PRODUCT)
    result = ScrapeResult(product_name=product_name)

    for card in page.query_selector_all(REVIEW_CARD_SELECTOR):
        entry = extract_entry(card)
        if entry is not None:
            result.entries.append(entry)

    if result.is_empty:
        logger.warning(
            "No reviews found for %s. The page might be empty or selectors are outdated.",
            product_name,
        )
    else:
        logger.info("Scraped %d reviews for %s.", result.total_reviews, product_name)
    return result
