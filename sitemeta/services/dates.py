"""Timestamp helpers shared by the SEO deriver and the feed builder."""

from datetime import date, datetime, time, timezone
from typing import Union

DateLike = Union[date, datetime]


def as_utc(value: DateLike) -> datetime:
    """Return *value* as an aware UTC datetime.

    Naive datetimes are taken to already be in UTC (front-matter dates are
    written without a zone); plain dates become midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_xml_date(value: DateLike) -> str:
    """Format *value* as ``YYYY-MM-DDTHH:MM:SS+00:00``.

    ``2015-02-20T00:00:00.000Z`` becomes ``2015-02-20T00:00:00+00:00``:
    fractional seconds are dropped and the zone is written as an explicit
    offset rather than ``Z``.
    """
    return as_utc(value).strftime("%Y-%m-%dT%H:%M:%S+00:00")
