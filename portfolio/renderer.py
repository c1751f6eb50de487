"""Page renderer for the portfolio site.

Composes the SEO head, header, work section and footer into one HTML page
using Jinja2 templates shipped in ``portfolio/templates``.
"""

import logging
from typing import Optional

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from models.config_models import Config
from portfolio.layout import NAVIGATION, logo_name
from portfolio.seo import ArticleNode, build_seo
from portfolio.showcase import RepositoryShowcase

logger = logging.getLogger(__name__)

GITHUB_PROFILE_URL = "https://github.com/{login}"


class PageRenderer:
    """Renders the portfolio page from config and a showcase.

    Usage:
        renderer = PageRenderer(config)
        html = renderer.render(showcase)
    """

    def __init__(self, config: Config):
        self.config = config
        self._env = Environment(
            loader=PackageLoader("portfolio", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(
        self,
        showcase: RepositoryShowcase,
        title: Optional[str] = None,
        description: Optional[str] = None,
        pathname: Optional[str] = None,
        article: Optional[ArticleNode] = None,
        template_name: str = "index.html",
    ) -> str:
        """Render the page with the showcase's current cards.

        A failed or still-loading showcase renders an empty work section.

        Raises:
            ValueError: If the template is missing or fails to render
        """
        site = self.config.site
        context = {
            "seo": build_seo(site, title=title, description=description, pathname=pathname, article=article),
            "site": site,
            "logo": logo_name(site.author),
            "navigation": NAVIGATION,
            "cards": showcase.cards,
            "profile_url": GITHUB_PROFILE_URL.format(login=self.config.credentials.github_username),
        }

        try:
            template = self._env.get_template(template_name)
            rendered = template.render(**context)
        except TemplateError as e:
            logger.error(f"Template rendering failed for {template_name}: {e}")
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.info(f"Rendered {template_name} with {len(context['cards'])} repository cards")
        return rendered
