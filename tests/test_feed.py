"""Tests for sitemeta.services.feed.build_feed."""

from datetime import datetime, timezone
from xml.etree import ElementTree

from sitemeta.models.render import FeedEntry
from sitemeta.models.site import Site
from sitemeta.services.feed import absolute_url, build_feed

ATOM = "{http://www.w3.org/2005/Atom}"

SITE = Site(
    title="Example Blog",
    tagline="Notes on code",
    author="Jane Doe",
    url="https://x.com",
)


def _parse(xml: str) -> ElementTree.Element:
    return ElementTree.fromstring(xml.encode("utf-8"))


def _entry(url: str, title: str, day: int) -> FeedEntry:
    return FeedEntry(
        url=url,
        title=title,
        date=datetime(2020, 1, day, tzinfo=timezone.utc),
        content=f"<p>{title}</p>",
    )


class TestAbsoluteUrl:
    def test_relative_path(self):
        assert absolute_url(SITE, "/blog/a/") == "https://x.com/blog/a/"

    def test_missing_leading_slash(self):
        assert absolute_url(SITE, "blog/a/") == "https://x.com/blog/a/"

    def test_absolute_url_unchanged(self):
        assert absolute_url(SITE, "https://other.org/a") == "https://other.org/a"


class TestBuildFeed:
    def test_feed_metadata(self):
        root = _parse(build_feed(SITE, [_entry("/blog/a/", "A", 1)]))
        assert root.tag == f"{ATOM}feed"
        assert root.findtext(f"{ATOM}title") == "Example Blog"
        assert root.findtext(f"{ATOM}subtitle") == "Notes on code"
        assert root.findtext(f"{ATOM}id") == "https://x.com/"
        assert root.findtext(f"{ATOM}author/{ATOM}name") == "Jane Doe"
        self_link = root.find(f"{ATOM}link[@rel='self']")
        assert self_link.get("href") == "https://x.com/feed.xml"

    def test_entries_newest_first(self):
        entries = [
            _entry("/blog/old/", "Old", 1),
            _entry("/blog/new/", "New", 9),
            _entry("/blog/mid/", "Mid", 5),
        ]
        root = _parse(build_feed(SITE, entries))
        titles = [e.findtext(f"{ATOM}title") for e in root.findall(f"{ATOM}entry")]
        assert titles == ["New", "Mid", "Old"]
        assert root.findtext(f"{ATOM}updated") == "2020-01-09T00:00:00+00:00"

    def test_entry_fields(self):
        root = _parse(build_feed(SITE, [_entry("/blog/a/", "A", 2)]))
        entry = root.find(f"{ATOM}entry")
        assert entry.findtext(f"{ATOM}id") == "https://x.com/blog/a/"
        assert entry.find(f"{ATOM}link").get("href") == "https://x.com/blog/a/"
        assert entry.findtext(f"{ATOM}updated") == "2020-01-02T00:00:00+00:00"
        content = entry.find(f"{ATOM}content")
        assert content.get("type") == "html"
        assert content.text == "<p>A</p>"

    def test_empty_feed_has_no_updated(self):
        root = _parse(build_feed(SITE, []))
        assert root.find(f"{ATOM}updated") is None
        assert root.findall(f"{ATOM}entry") == []

    def test_custom_feed_path(self):
        root = _parse(build_feed(SITE, [], feed_path="/atom.xml"))
        assert root.find(f"{ATOM}link[@rel='self']").get("href") == "https://x.com/atom.xml"

    def test_mixed_naive_and_aware_dates(self):
        entries = [
            FeedEntry(url="/a/", title="Naive", date=datetime(2020, 1, 3)),
            _entry("/b/", "Aware", 2),
        ]
        root = _parse(build_feed(SITE, entries))
        titles = [e.findtext(f"{ATOM}title") for e in root.findall(f"{ATOM}entry")]
        assert titles == ["Naive", "Aware"]
