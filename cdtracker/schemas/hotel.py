from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class HotelFields(BaseModel):
    name: str = Field(min_length=1)
    check_in_date: date
    custom_cooldown_days: PositiveInt | None = None  # None → default cooldown


class HotelRecord(HotelFields):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)


class HotelUpdate(BaseModel):
    """Partial edit. Omitted fields are kept; an explicit null
    custom_cooldown_days clears the custom cooldown."""

    name: str | None = Field(default=None, min_length=1)
    check_in_date: date | None = None
    custom_cooldown_days: PositiveInt | None = None

    @model_validator(mode="after")
    def _reject_null_required(self) -> HotelUpdate:
        for field in ("name", "check_in_date"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self
