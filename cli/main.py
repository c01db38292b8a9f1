"""G2 review scraper CLI — entry-point for running and exercising the service.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP service under uvicorn
    scrape    → scrape one product page and print the result as JSON
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from g2scraper.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from g2scraper.config import configure_logging, settings

app = typer.Typer(
    name="g2scraper",
    help="G2 review scraper service CLI.",
    no_args_is_help=True,
)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: $HOST or 0.0.0.0)."),
    port: Optional[int] = typer.Option(None, help="Listen port (default: $PORT or 3001)."),
    reload: bool = typer.Option(False, help="Reload on code changes (development only)."),
) -> None:
    """Run the scraper HTTP service."""
    import uvicorn

    configure_logging()
    host = host or settings.host
    port = port or settings.port
    typer.echo(f"[serve] Scraper service listening on {host}:{port}")
    uvicorn.run(
        "g2scraper.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="G2 product review page URL."),
) -> None:
    """Scrape one G2 product page and print the reviews as JSON."""
    from g2scraper.scraper import is_product_url, scrape_reviews

    if not is_product_url(url):
        typer.echo("[scrape] Please provide a valid G2 product URL.", err=True)
        raise typer.Exit(code=1)

    configure_logging()
    typer.echo(f"[scrape] Scraping {url!r} …", err=True)
    try:
        result = scrape_reviews(url)
    except Exception as exc:
        typer.echo(f"[scrape] Failed to scrape reviews: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
