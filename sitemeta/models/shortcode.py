from typing import Optional

from pydantic import BaseModel


class ImageShortcodeRequest(BaseModel):
    path: str
    title: Optional[str] = None
    caption: Optional[str] = None


class CloudinaryShortcodeRequest(ImageShortcodeRequest):
    transformations: Optional[str] = None
    """Cloudinary transformation segment, e.g. ``"w_800,c_limit"``."""


class ShortcodeResponse(BaseModel):
    html: str
