import logging
from datetime import date

from fastapi import APIRouter, Response

from cdtracker.dependencies import TrackerDep
from cdtracker.schemas.hotel import HotelFields, HotelUpdate
from cdtracker.schemas.responses import HotelListResponse, HotelView

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=HotelListResponse)
async def list_hotels(
    service: TrackerDep,
    q: str = "",
    as_of: date | None = None,
) -> HotelListResponse:
    return service.list_visible(query=q, as_of=as_of)


@router.get("/history", response_model=HotelListResponse)
async def hotel_history(
    service: TrackerDep,
    as_of: date | None = None,
) -> HotelListResponse:
    return service.history(as_of=as_of)


@router.get("/{hotel_id}", response_model=HotelView)
async def get_hotel(
    hotel_id: str,
    service: TrackerDep,
    as_of: date | None = None,
) -> HotelView:
    return service.detail(hotel_id, as_of=as_of)


@router.post("", response_model=HotelView, status_code=201)
async def create_hotel(fields: HotelFields, service: TrackerDep) -> HotelView:
    return service.create(fields)


@router.patch("/{hotel_id}", response_model=HotelView)
async def update_hotel(
    hotel_id: str,
    changes: HotelUpdate,
    service: TrackerDep,
) -> HotelView:
    return service.update(hotel_id, changes)


@router.delete("/{hotel_id}", status_code=204)
async def delete_hotel(hotel_id: str, service: TrackerDep) -> Response:
    if not service.delete(hotel_id):
        logger.debug("Delete of unknown hotel %s ignored", hotel_id)
    return Response(status_code=204)
