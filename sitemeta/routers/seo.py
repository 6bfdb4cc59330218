import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from sitemeta.config import get_site
from sitemeta.models.page import PageContext
from sitemeta.models.seo import SeoFields
from sitemeta.models.site import Site
from sitemeta.routers.limits import DERIVE_LIMIT, limiter
from sitemeta.services.head import render_head
from sitemeta.services.seo import derive_seo

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/seo", response_model=SeoFields, summary="Derive SEO metadata for a page")
@limiter.limit(DERIVE_LIMIT)
async def seo_fields(
    request: Request,
    body: PageContext,
    site: Site = Depends(get_site),
) -> SeoFields:
    """Return the title, description, canonical URL, social image and JSON-LD for a page.

    Front-matter fields in the body override the site-wide defaults; a page
    whose ``seoPageType`` is ``"article"`` is described as a blog post.
    """
    logger.info(
        "SEO request received",
        extra={"url": body.url, "seo_page_type": body.seo_page_type},
    )
    return derive_seo(site, body)


@router.post(
    "/seo/head",
    response_class=HTMLResponse,
    summary="Render the <head> tags for a page",
)
@limiter.limit(DERIVE_LIMIT)
async def seo_head(
    request: Request,
    body: PageContext,
    site: Site = Depends(get_site),
) -> HTMLResponse:
    """Derive the page's SEO fields and render them as title, meta, link and JSON-LD tags."""
    logger.info("Head request received", extra={"url": body.url})
    return HTMLResponse(render_head(derive_seo(site, body)))
