"""Markdown rendering for posts and pages.

Headings get stable ``id`` anchors and a paragraph consisting only of
``[[toc]]`` is replaced with a table of contents built from those headings.
Image shortcodes are expanded before the Markdown is parsed.
"""

import re
from typing import NamedTuple, Optional
from urllib.parse import quote

import markdown
from bs4 import BeautifulSoup
from markdown.extensions.toc import TocExtension

from sitemeta.services.shortcodes import expand_shortcodes

TOC_MARKER = "[[toc]]"
TOC_CLASS = "table-of-contents"
TOC_HEADER_CLASS = "table-of-contents-header"
TOC_HEADER_TEXT = "Table of contents"
TOC_DEPTH = "1-2"  # h1 and h2 only; every heading still gets an anchor


class RenderedMarkdown(NamedTuple):
    html: str
    toc_present: bool


def anchor_slug(value: str, separator: str = "-") -> str:
    """Heading anchor: trimmed, lowercased, whitespace runs collapsed, URI-encoded."""
    slug = re.sub(r"\s+", separator, value.strip().lower())
    return quote(slug, safe="!*'()")


def _replace_toc_markers(html: str, toc_html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    markers = [
        p for p in soup.find_all("p")
        if p.get_text(strip=True) == TOC_MARKER and not p.find(True)
    ]
    if not markers:
        return html

    toc_list = BeautifulSoup(toc_html, "html.parser").find("ul")
    for marker in markers:
        container = soup.new_tag("div", attrs={"class": TOC_CLASS})
        header = soup.new_tag("div", attrs={"class": TOC_HEADER_CLASS})
        header.string = TOC_HEADER_TEXT
        container.append(header)
        if toc_list is not None:
            container.append(BeautifulSoup(str(toc_list), "html.parser").find("ul"))
        marker.replace_with(container)

    return str(soup)


def render_markdown(text: str, cloud_name: Optional[str] = None) -> RenderedMarkdown:
    """Render Markdown *text* to HTML.

    Raw HTML in the source is passed through.  Raises
    :class:`~sitemeta.services.shortcodes.ShortcodeError` for malformed
    shortcode tags.
    """
    source = expand_shortcodes(text, cloud_name)

    md = markdown.Markdown(
        extensions=["extra", TocExtension(slugify=anchor_slug, marker="", toc_depth=TOC_DEPTH)],
    )
    html = md.convert(source)

    if TOC_MARKER not in html:
        return RenderedMarkdown(html=html, toc_present=False)

    rendered = _replace_toc_markers(html, md.toc)
    return RenderedMarkdown(html=rendered, toc_present=rendered != html)
