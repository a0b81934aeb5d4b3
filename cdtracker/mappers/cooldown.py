"""Pure functions for hotel cooldown (CD) arithmetic and list curation.

No I/O. Nothing here reads the system clock except ``today_in``; every
other function that depends on the current day takes *today* explicitly.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cdtracker.schemas.hotel import HotelRecord

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN_DAYS = 30
CHECKOUT_OFFSET_DAYS = 1
URGENT_THRESHOLD_DAYS = 7


def get_timezone(name: str | None) -> ZoneInfo:
    """Return ZoneInfo for an IANA name. Falls back to UTC."""
    if not name:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return ZoneInfo("UTC")


def today_in(tz_name: str | None, now: datetime | None = None) -> date:
    """Calendar date of *now* (default: current UTC time) in *tz_name*."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(get_timezone(tz_name)).date()


def _add_days(start: date, days: int) -> date:
    """Add *days* to *start*. On calendar overflow *start* is returned as-is."""
    try:
        return start + timedelta(days=days)
    except OverflowError:
        logger.debug("Date overflow adding %d days to %s", days, start)
        return start


def cooldown_days(record: HotelRecord) -> int:
    return record.custom_cooldown_days or DEFAULT_COOLDOWN_DAYS


def checkout_date(record: HotelRecord) -> date:
    """check_in_date + 1 day + cooldown days.

    Each step saturates independently, so an overflowing cooldown still
    keeps the one-day offset when that step fits.
    """
    checkout = _add_days(record.check_in_date, CHECKOUT_OFFSET_DAYS)
    return _add_days(checkout, cooldown_days(record))


def remaining_days(record: HotelRecord, today: date) -> int:
    """Whole days from *today* until the checkout date, never negative."""
    return max((checkout_date(record) - today).days, 0)


def is_expired(record: HotelRecord, today: date) -> bool:
    return remaining_days(record, today) == 0


def is_urgent(
    record: HotelRecord, today: date, threshold: int = URGENT_THRESHOLD_DAYS,
) -> bool:
    """Still running but with fewer than *threshold* days left."""
    remaining = remaining_days(record, today)
    return 0 < remaining < threshold


def matches_query(name: str, query: str) -> bool:
    """Case-insensitive substring match. An empty query matches everything."""
    if not query:
        return True
    return query.casefold() in name.casefold()


def visible_records(
    records: Iterable[HotelRecord], query: str, today: date,
) -> list[HotelRecord]:
    """Non-expired records matching *query*, in insertion order."""
    active = [r for r in records if remaining_days(r, today) > 0]
    if not query:
        return active
    return [r for r in active if matches_query(r.name, query)]


def can_insert(records: Iterable[HotelRecord], name: str) -> bool:
    # Exact comparison: uniqueness is case-sensitive even though search is not.
    return not any(r.name == name for r in records)


def can_rename(records: Iterable[HotelRecord], excluding_id: str, name: str) -> bool:
    return not any(r.id != excluding_id and r.name == name for r in records)
