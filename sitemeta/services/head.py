"""Renders derived SEO fields into ``<head>`` markup."""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from sitemeta.models.seo import SeoFields

_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Values are already attribute-safe (see escape_description); autoescaping
# would turn &quot; into &amp;quot;.
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def _twitter_handle(account: str) -> Optional[str]:
    if not account:
        return None
    return account if account.startswith("@") else f"@{account}"


def render_head(seo: SeoFields) -> str:
    """Return the title, meta, link and JSON-LD tags for one page."""
    template = _env.get_template("seo.html")
    return template.render(seo=seo, twitter_handle=_twitter_handle(seo.twitter_account))
