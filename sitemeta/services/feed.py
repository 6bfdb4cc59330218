"""Atom feed generation for dated posts."""

from typing import List
from urllib.parse import urlparse
from xml.etree import ElementTree

from sitemeta.models.render import FeedEntry
from sitemeta.models.site import Site
from sitemeta.services.dates import as_utc, to_xml_date

ATOM_NS = "http://www.w3.org/2005/Atom"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


def absolute_url(site: Site, url: str) -> str:
    """Return *url* unchanged when absolute, otherwise prefixed with the site origin."""
    if urlparse(url).scheme:
        return url
    if not url.startswith("/"):
        url = "/" + url
    return site.url + url


def _text(parent: ElementTree.Element, tag: str, text: str, **attrs: str) -> ElementTree.Element:
    elem = ElementTree.SubElement(parent, tag, attrs)
    elem.text = text
    return elem


def build_feed(site: Site, entries: List[FeedEntry], feed_path: str = "/feed.xml") -> str:
    """Return an Atom 1.0 document listing *entries*, newest first."""
    ordered = sorted(entries, key=lambda entry: as_utc(entry.date), reverse=True)
    home = site.url + "/"

    feed = ElementTree.Element("feed", {"xmlns": ATOM_NS})
    _text(feed, "title", site.title)
    if site.tagline:
        _text(feed, "subtitle", site.tagline)
    ElementTree.SubElement(feed, "link", {"href": absolute_url(site, feed_path), "rel": "self"})
    ElementTree.SubElement(feed, "link", {"href": home})
    if ordered:
        _text(feed, "updated", to_xml_date(ordered[0].date))
    _text(feed, "id", home)
    author = ElementTree.SubElement(feed, "author")
    _text(author, "name", site.author)

    for entry in ordered:
        url = absolute_url(site, entry.url)
        item = ElementTree.SubElement(feed, "entry")
        _text(item, "title", entry.title)
        ElementTree.SubElement(item, "link", {"href": url})
        _text(item, "updated", to_xml_date(entry.date))
        _text(item, "id", url)
        _text(item, "content", entry.content, type="html")

    ElementTree.indent(feed)
    return XML_DECLARATION + ElementTree.tostring(feed, encoding="unicode")
