"""SEO head data: meta tags, Open Graph/Twitter cards and schema.org JSON-LD."""

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from models.config_models import SiteMetadata

SCHEMA_CONTEXT = "http://schema.org"
DATE_PUBLISHED = "2020-03-12T10:30:00+05:30"
COPYRIGHT_YEAR = "2020"
ARTICLE_COPYRIGHT_YEAR = "2019"

# Page sections listed in the breadcrumb trail, in order
BREADCRUMB_SECTIONS = [
    ("blogs", "Blogs"),
    ("work", "Work"),
    ("experience", "Experience"),
    ("contact", "Contact"),
]


class ArticleNode(BaseModel):
    """Publication dates of a blog post page."""
    first_publication_date: str
    last_publication_date: str


class MetaTag(BaseModel):
    """A ``<meta>`` element, keyed by ``name`` or ``property``."""
    attribute: Literal["name", "property"] = "name"
    key: str
    content: str


class SeoTags(BaseModel):
    """Everything the page head needs."""
    title: str
    description: str
    image: str
    url: str
    language: str
    meta: list[MetaTag] = Field(default_factory=list)
    json_ld: list[dict[str, Any]] = Field(default_factory=list)


def _person(name: str) -> dict[str, str]:
    return {"@type": "Person", "name": name}


def _breadcrumb_items(site_url: str) -> list[dict[str, Any]]:
    return [
        {
            "@type": "ListItem",
            "item": {"@id": f"{site_url}/#{anchor}", "name": name},
            "position": position,
        }
        for position, (anchor, name) in enumerate(BREADCRUMB_SECTIONS, start=1)
    ]


def _web_page_schema(metadata: SiteMetadata, build_time: str) -> dict[str, Any]:
    site_url = metadata.site_url
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "url": site_url,
        "headline": metadata.headline,
        "inLanguage": metadata.site_language,
        "mainEntityOfPage": site_url,
        "description": metadata.description,
        "name": metadata.title,
        "author": _person(metadata.author),
        "copyrightHolder": _person(metadata.author),
        "copyrightYear": COPYRIGHT_YEAR,
        "creator": _person(metadata.author),
        "publisher": _person(metadata.author),
        "datePublished": DATE_PUBLISHED,
        "dateModified": build_time,
        "image": {"@type": "ImageObject", "url": f"{site_url}{metadata.banner}"},
    }


def _article_schema(metadata: SiteMetadata, seo: SeoTags, node: ArticleNode) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "author": _person(metadata.author),
        "copyrightHolder": _person(metadata.author),
        "copyrightYear": ARTICLE_COPYRIGHT_YEAR,
        "creator": _person(metadata.author),
        "publisher": {
            "@type": "Organization",
            "name": metadata.author,
            "logo": {"@type": "ImageObject", "url": f"{metadata.site_url}{metadata.banner}"},
        },
        "datePublished": node.first_publication_date,
        "dateModified": node.last_publication_date,
        "description": seo.description,
        "headline": seo.title,
        "inLanguage": metadata.site_language,
        "url": seo.url,
        "name": seo.title,
        "image": {"@type": "ImageObject", "url": seo.image},
        "mainEntityOfPage": seo.url,
    }


def _social_tags(metadata: SiteMetadata, seo: SeoTags, is_article: bool) -> list[MetaTag]:
    og = [
        ("og:site_name", metadata.facebook),
        ("og:locale", metadata.og_language),
        ("og:url", seo.url),
        ("og:type", "article" if is_article else "website"),
        ("og:title", seo.title),
        ("og:description", seo.description),
        ("og:image", seo.image),
        ("og:image:alt", seo.description),
    ]
    twitter = [
        ("twitter:card", "summary_large_image"),
        ("twitter:creator", f"@{metadata.twitter}" if metadata.twitter else ""),
        ("twitter:title", seo.title),
        ("twitter:description", seo.description),
        ("twitter:image", seo.image),
        ("twitter:image:alt", seo.description),
    ]
    # Empty values (e.g. no Twitter handle configured) are left out
    tags = [MetaTag(attribute="property", key=k, content=v) for k, v in og if v]
    tags += [MetaTag(attribute="name", key=k, content=v) for k, v in twitter if v]
    return tags


def build_seo(
    metadata: SiteMetadata,
    title: Optional[str] = None,
    description: Optional[str] = None,
    banner: Optional[str] = None,
    pathname: Optional[str] = None,
    article: Optional[ArticleNode] = None,
) -> SeoTags:
    """
    Assemble the page head from site metadata and per-page overrides.

    Args:
        metadata: Site-wide metadata
        title: Page title (defaults to the site title)
        description: Page description (defaults to the site description)
        banner: Share image path relative to the site URL
        pathname: Page path appended to the site URL
        article: Publication dates when the page is a blog post

    Returns:
        SeoTags: Title, description, meta tags and JSON-LD documents. The
        first JSON-LD document is the WebPage (or Article) schema, the last
        is the breadcrumb list.
    """
    site_url = metadata.site_url
    build_time = metadata.build_time or date.today().isoformat()

    seo = SeoTags(
        title=title or metadata.title,
        description=description or metadata.description,
        image=f"{site_url}{banner or metadata.banner}",
        url=f"{site_url}{pathname or ''}",
        language=metadata.site_language,
    )

    item_list = _breadcrumb_items(site_url)

    if article is not None:
        main_schema = _article_schema(metadata, seo, article)
        item_list.append({
            "@type": "ListItem",
            "item": {"@id": seo.url, "name": seo.title},
            "position": len(item_list) + 1,
        })
    else:
        main_schema = _web_page_schema(metadata, build_time)

    breadcrumb = {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "description": metadata.description,
        "name": metadata.author,
        "itemListElement": item_list,
    }

    seo.meta = [
        MetaTag(key="description", content=seo.description),
        MetaTag(key="image", content=seo.image),
    ] + _social_tags(metadata, seo, is_article=article is not None)
    seo.json_ld = [main_schema, breadcrumb]
    return seo
