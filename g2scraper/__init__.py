"""G2 review scraper service: headless-browser review extraction over HTTP."""
