"""Liveness endpoint.

Routes
------
GET /health    → plain-text liveness string
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HEALTH_MESSAGE = "Scraper service is running."


@router.get("/health", response_class=PlainTextResponse)
def health() -> str:
    return HEALTH_MESSAGE
