import logging
from collections.abc import Callable
from datetime import date

from cdtracker.exceptions.custom import RecordNotFoundError
from cdtracker.mappers.cooldown import URGENT_THRESHOLD_DAYS, visible_records
from cdtracker.mappers.view_builder import build_hotel_list, build_hotel_view
from cdtracker.schemas.hotel import HotelFields, HotelRecord, HotelUpdate
from cdtracker.schemas.responses import HotelListResponse, HotelView
from cdtracker.store import HotelStore

logger = logging.getLogger(__name__)


class TrackerService:
    def __init__(
        self,
        store: HotelStore,
        clock: Callable[[], date],
        urgent_threshold_days: int = URGENT_THRESHOLD_DAYS,
    ) -> None:
        self.store = store
        self.clock = clock
        self.urgent_threshold_days = urgent_threshold_days

    def today(self, as_of: date | None = None) -> date:
        return as_of if as_of is not None else self.clock()

    def _view(self, record: HotelRecord, today: date) -> HotelView:
        return build_hotel_view(record, today, self.urgent_threshold_days)

    def list_visible(self, query: str = "", as_of: date | None = None) -> HotelListResponse:
        """Non-expired hotels matching *query*, in insertion order."""
        today = self.today(as_of)
        records = visible_records(self.store.records, query, today)
        logger.debug(
            "Visible hotels for %r on %s: %d of %d",
            query, today, len(records), len(self.store),
        )
        return build_hotel_list(records, today, query, self.urgent_threshold_days)

    def history(self, as_of: date | None = None) -> HotelListResponse:
        """Every hotel, expired ones included."""
        today = self.today(as_of)
        return build_hotel_list(
            list(self.store.records), today, urgent_threshold=self.urgent_threshold_days,
        )

    def detail(self, record_id: str, as_of: date | None = None) -> HotelView:
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return self._view(record, self.today(as_of))

    def create(self, fields: HotelFields) -> HotelView:
        record = self.store.add(fields)
        return self._view(record, self.today())

    def update(self, record_id: str, changes: HotelUpdate) -> HotelView:
        record = self.store.update(record_id, changes)
        return self._view(record, self.today())

    def delete(self, record_id: str) -> bool:
        return self.store.remove(record_id)
