from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class HotelView(BaseModel):
    id: str
    name: str
    check_in_date: date
    custom_cooldown_days: int | None = None
    cooldown_days: int
    checkout_date: date
    remaining_days: int
    is_expired: bool
    is_urgent: bool


class HotelListResponse(BaseModel):
    as_of: date
    query: str = ""
    total: int
    hotels: list[HotelView]
