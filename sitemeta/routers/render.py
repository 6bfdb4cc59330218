"""Content rendering endpoints: Markdown posts and the Atom feed."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from sitemeta.config import get_site
from sitemeta.models.render import FeedRequest, MarkdownRequest, MarkdownResponse
from sitemeta.models.site import Site
from sitemeta.routers.limits import RENDER_LIMIT, limiter
from sitemeta.services.feed import build_feed
from sitemeta.services.rendering import render_markdown
from sitemeta.services.shortcodes import ShortcodeError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/render/markdown",
    response_model=MarkdownResponse,
    summary="Render Markdown with heading anchors, TOC and image shortcodes",
)
@limiter.limit(RENDER_LIMIT)
async def markdown(
    request: Request,
    body: MarkdownRequest,
    site: Site = Depends(get_site),
) -> MarkdownResponse:
    """Render a post body.

    ``{% image %}`` and ``{% cloudinaryImage %}`` tags are expanded first, and a
    paragraph containing only ``[[toc]]`` becomes a table of contents.
    """
    logger.info("Markdown render request received", extra={"length": len(body.markdown)})
    try:
        rendered = render_markdown(body.markdown, site.cloudinary_cloud_name)
    except ShortcodeError as exc:
        logger.warning("Rejected shortcode: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return MarkdownResponse(html=rendered.html, toc_present=rendered.toc_present)


@router.post("/feed", summary="Build the site's Atom feed")
@limiter.limit(RENDER_LIMIT)
async def feed(
    request: Request,
    body: FeedRequest,
    site: Site = Depends(get_site),
) -> Response:
    logger.info("Feed request received", extra={"entries": len(body.entries)})
    xml = build_feed(site, body.entries, body.feed_path)
    return Response(content=xml, media_type="application/atom+xml")
