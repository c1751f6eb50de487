"""
Portfolio site server - FastAPI application serving the portfolio page.

Renders the page on each request and exposes the pinned repositories
as JSON.
"""
