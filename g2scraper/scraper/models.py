"""Data models for the review scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

NOT_AVAILABLE = "N/A"
UNKNOWN_PRODUCT = "Unknown Product"
NO_REVIEWS_PLACEHOLDER = (
    "No reviews scraped. Content might be dynamic or selectors are outdated."
)


@dataclass
class ReviewerInfo:
    """Who wrote a review, as shown on the card."""

    name: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    industry: str = NOT_AVAILABLE
    company_size: str = NOT_AVAILABLE
    review_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "company": self.company,
            "industry": self.industry,
            "companySize": self.company_size,
            "reviewDate": self.review_date,
        }


@dataclass
class ReviewEntry:
    """One qualifying review card."""

    text: str
    rating: Optional[float]
    reviewer: ReviewerInfo = field(default_factory=ReviewerInfo)


@dataclass
class ScrapeResult:
    """Everything scraped from one product page.

    Entries are kept as per-card records so the ``reviews``, ``ratings`` and
    ``reviewerData`` arrays of the serialised form always share an index.
    """

    product_name: str
    entries: List[ReviewEntry] = field(default_factory=list)

    @property
    def total_reviews(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def reviews(self) -> List[str]:
        if self.is_empty:
            return [NO_REVIEWS_PLACEHOLDER]
        return [e.text for e in self.entries]

    @property
    def ratings(self) -> List[Optional[float]]:
        return [e.rating for e in self.entries]

    @property
    def reviewer_data(self) -> List[ReviewerInfo]:
        return [e.reviewer for e in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the camelCase JSON shape returned by the API."""
        return {
            "productName": self.product_name,
            "reviews": self.reviews,
            "ratings": self.ratings,
            "totalReviews": self.total_reviews,
            "reviewerData": [r.to_dict() for r in self.reviewer_data],
        }
