from datetime import date

from cdtracker.mappers.cooldown import (
    URGENT_THRESHOLD_DAYS,
    checkout_date,
    cooldown_days,
    is_urgent,
    remaining_days,
)
from cdtracker.schemas.hotel import HotelRecord
from cdtracker.schemas.responses import HotelListResponse, HotelView


def build_hotel_view(
    record: HotelRecord,
    today: date,
    urgent_threshold: int = URGENT_THRESHOLD_DAYS,
) -> HotelView:
    """Snapshot a record with its derived CD fields as of *today*."""
    remaining = remaining_days(record, today)
    return HotelView(
        id=record.id,
        name=record.name,
        check_in_date=record.check_in_date,
        custom_cooldown_days=record.custom_cooldown_days,
        cooldown_days=cooldown_days(record),
        checkout_date=checkout_date(record),
        remaining_days=remaining,
        is_expired=remaining == 0,
        is_urgent=is_urgent(record, today, urgent_threshold),
    )


def build_hotel_list(
    records: list[HotelRecord],
    today: date,
    query: str = "",
    urgent_threshold: int = URGENT_THRESHOLD_DAYS,
) -> HotelListResponse:
    return HotelListResponse(
        as_of=today,
        query=query,
        total=len(records),
        hotels=[build_hotel_view(r, today, urgent_threshold) for r in records],
    )
