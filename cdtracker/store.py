from __future__ import annotations

import logging

from cdtracker.mappers.collection import (
    HotelCollection,
    add_record,
    find_record,
    remove_record,
    update_record,
)
from cdtracker.schemas.hotel import HotelFields, HotelRecord, HotelUpdate

logger = logging.getLogger(__name__)


class HotelStore:
    """Owns the current hotel collection value.

    Mutations run through the pure collection transforms and swap the stored
    tuple only when the transform succeeds.
    """

    def __init__(self, records: HotelCollection = ()) -> None:
        self._records: HotelCollection = tuple(records)

    @property
    def records(self) -> HotelCollection:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> HotelRecord | None:
        return find_record(self._records, record_id)

    def add(self, fields: HotelFields) -> HotelRecord:
        record = HotelRecord(**fields.model_dump())
        self._records = add_record(self._records, record)
        logger.info("Added hotel %s (%r)", record.id, record.name)
        return record

    def update(self, record_id: str, changes: HotelUpdate) -> HotelRecord:
        self._records = update_record(self._records, record_id, changes)
        logger.info(
            "Updated hotel %s: %s", record_id, sorted(changes.model_fields_set),
        )
        return find_record(self._records, record_id)

    def remove(self, record_id: str) -> bool:
        before = len(self._records)
        self._records = remove_record(self._records, record_id)
        removed = len(self._records) < before
        if removed:
            logger.info("Removed hotel %s", record_id)
        return removed
