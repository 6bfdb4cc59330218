import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from sitemeta.config import get_site
from sitemeta.models.shortcode import (
    CloudinaryShortcodeRequest,
    ImageShortcodeRequest,
    ShortcodeResponse,
)
from sitemeta.models.site import Site
from sitemeta.routers.limits import DERIVE_LIMIT, limiter
from sitemeta.services.shortcodes import cloudinary_figure, image_figure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shortcodes")


@router.post("/image", response_model=ShortcodeResponse, summary="Render a local image figure")
@limiter.limit(DERIVE_LIMIT)
async def image(request: Request, body: ImageShortcodeRequest) -> ShortcodeResponse:
    return ShortcodeResponse(html=image_figure(body.path, body.title, body.caption))


@router.post(
    "/cloudinary-image",
    response_model=ShortcodeResponse,
    summary="Render a Cloudinary-hosted image figure",
)
@limiter.limit(DERIVE_LIMIT)
async def cloudinary_image(
    request: Request,
    body: CloudinaryShortcodeRequest,
    site: Site = Depends(get_site),
) -> ShortcodeResponse:
    """Build the Cloudinary delivery URL from the configured cloud name and wrap it in a figure."""
    if not site.cloudinary_cloud_name:
        logger.warning("Cloudinary shortcode requested but no cloud name is configured")
        raise HTTPException(status_code=400, detail="No Cloudinary cloud name is configured.")

    html = cloudinary_figure(
        site.cloudinary_cloud_name,
        body.path,
        body.title,
        body.caption,
        body.transformations,
    )
    return ShortcodeResponse(html=html)
