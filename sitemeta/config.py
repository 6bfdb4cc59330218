"""Site configuration loading.

The configuration file is the generator's global data file (``site.json``)
and is read once per process.  Call ``get_site.cache_clear()`` to pick up
changes.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from sitemeta.models.site import Site

logger = logging.getLogger(__name__)

SITE_CONFIG_ENV = "SITEMETA_SITE_CONFIG"
DEFAULT_SITE_CONFIG = "_data/site.json"


class SiteConfigError(RuntimeError):
    """Raised when the site configuration file is missing or invalid."""


def load_site_config(path: Union[str, Path]) -> Site:
    """Read and validate the site configuration at *path*.

    Raises:
        SiteConfigError: if the file cannot be read or does not describe a site.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SiteConfigError(f"Cannot read site config {path}: {exc}") from exc

    try:
        site = Site.model_validate_json(raw)
    except ValidationError as exc:
        raise SiteConfigError(f"Invalid site config {path}: {exc}") from exc

    if site.url.endswith("/"):
        logger.warning("Site url %s ends with a slash; page URLs will be doubled up", site.url)
    return site


@lru_cache(maxsize=1)
def get_site() -> Site:
    """FastAPI dependency returning the process-wide site configuration."""
    path = os.environ.get(SITE_CONFIG_ENV, DEFAULT_SITE_CONFIG)
    logger.info("Loading site config from %s", path)
    return load_site_config(path)
