"""SEO metadata derivation.

Every function here is a pure mapping from the site configuration and one
page's context to a single head field.  The site is always passed in
explicitly so the same page can be derived against different configurations.
"""

import json
from typing import Optional

from sitemeta.models.page import PageContext
from sitemeta.models.seo import SeoFields, SeoImage
from sitemeta.models.site import Site
from sitemeta.services.dates import to_xml_date

SCHEMA_CONTEXT = "https://schema.org"


def full_title(site: Site, page: PageContext) -> str:
    """Title for the ``<title>`` tag."""
    if page.title:
        return f"{page.title} - {site.title}"
    return f"{site.title} - {site.tagline}"


def page_title(site: Site, page: PageContext) -> str:
    """Page title without the site title or tagline appended."""
    return page.title or site.title


def site_title(site: Site) -> str:
    return site.title


def _raw_description(site: Site, page: PageContext) -> str:
    return page.description or site.description


def escape_description(site: Site, page: PageContext) -> str:
    """Description safe to place inside a double-quoted attribute.

    Only ``"`` is escaped; other characters pass through unchanged.
    """
    return _raw_description(site, page).replace('"', "&quot;")


def canonical_url(site: Site, page: PageContext) -> str:
    if page.url:
        return site.url + page.url
    return site.url


def publish_date(page: PageContext) -> Optional[str]:
    if not page.is_article:
        return None
    return to_xml_date(page.date)


def social_image(site: Site, page: PageContext) -> Optional[SeoImage]:
    if page.image is None:
        return None
    return SeoImage(
        url=f"{site.url}/{page.image.path}",
        width=page.image.width,
        height=page.image.height,
    )


def twitter_account(site: Site) -> str:
    return site.twitter


def json_ld(site: Site, page: PageContext) -> str:
    """Return the schema.org structured-data payload as compact JSON text.

    Articles are described as a ``BlogPosting`` with publication dates and an
    author; every other page is described as the ``WebSite`` itself.
    """
    url = canonical_url(site, page)
    payload = {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting" if page.is_article else "WebSite",
        "url": url,
        "headline": page_title(site, page),
        # Serialised by json.dumps, so the attribute escaping does not apply
        "description": _raw_description(site, page),
    }

    if page.is_article:
        published = publish_date(page)
        payload["datePublished"] = published
        payload["dateModified"] = published
        payload["mainEntityOfPage"] = {"@type": "WebPage", "@id": url}
        payload["author"] = {"@type": "Person", "name": site.author}
    else:
        payload["name"] = site.title

    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def derive_seo(site: Site, page: PageContext) -> SeoFields:
    """Compute every head field for *page*."""
    return SeoFields(
        title=full_title(site, page),
        page_title=page_title(site, page),
        site_title=site_title(site),
        description=escape_description(site, page),
        canonical_url=canonical_url(site, page),
        date=publish_date(page),
        image=social_image(site, page),
        twitter_account=twitter_account(site),
        author=site.author,
        locale=site.locale,
        json_ld=json_ld(site, page),
    )
