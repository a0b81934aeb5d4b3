"""Pure CRUD transforms over an immutable, insertion-ordered hotel collection.

Every function takes a tuple and returns a new tuple; the input is never
mutated, so a rejected operation leaves the caller's collection untouched.
"""

from cdtracker.exceptions.custom import DuplicateNameError, RecordNotFoundError
from cdtracker.mappers.cooldown import can_insert, can_rename
from cdtracker.schemas.hotel import HotelRecord, HotelUpdate

HotelCollection = tuple[HotelRecord, ...]


def _index_of(records: HotelCollection, record_id: str) -> int | None:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None


def find_record(records: HotelCollection, record_id: str) -> HotelRecord | None:
    index = _index_of(records, record_id)
    return None if index is None else records[index]


def add_record(records: HotelCollection, record: HotelRecord) -> HotelCollection:
    """Append *record*. Raises DuplicateNameError if its name is taken."""
    if not can_insert(records, record.name):
        raise DuplicateNameError(record.name)
    return (*records, record)


def update_record(
    records: HotelCollection, record_id: str, changes: HotelUpdate,
) -> HotelCollection:
    """Apply *changes* to the record with *record_id*, keeping its position.

    Raises RecordNotFoundError for an unknown id and DuplicateNameError when
    the new name belongs to a different record.
    """
    index = _index_of(records, record_id)
    if index is None:
        raise RecordNotFoundError(record_id)

    values = changes.model_dump(exclude_unset=True)
    current = records[index]
    new_name = values.get("name", current.name)
    if not can_rename(records, record_id, new_name):
        raise DuplicateNameError(new_name)

    updated = current.model_copy(update=values)
    return (*records[:index], updated, *records[index + 1:])


def remove_record(records: HotelCollection, record_id: str) -> HotelCollection:
    """Drop the record with *record_id*. Unknown ids are a no-op."""
    return tuple(r for r in records if r.id != record_id)
