"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from g2scraper.api import app

    uvicorn g2scraper.api:app --reload
"""

from g2scraper.api.app import app

__all__ = ["app"]
