"""
Portfolio site - page composition and the pinned repository showcase.

Renders the portfolio page (SEO head, header, work section, footer) with
Jinja2 and fetches the showcased repositories from GitHub.
"""
