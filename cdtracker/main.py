import logging
import sys
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI

from cdtracker.config import Settings
from cdtracker.exceptions.custom import DuplicateNameError, RecordNotFoundError
from cdtracker.exceptions.handlers import (
    duplicate_name_error_handler,
    record_not_found_error_handler,
)
from cdtracker.mappers.cooldown import today_in
from cdtracker.routers.hotels import router as hotels_router
from cdtracker.services.tracker import TrackerService
from cdtracker.store import HotelStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    app.state.hotel_store = HotelStore()
    app.state.tracker_service = TrackerService(
        app.state.hotel_store,
        clock=partial(today_in, settings.timezone),
        urgent_threshold_days=settings.urgent_threshold_days,
    )

    yield


app = FastAPI(title="Hotel CD Tracker", lifespan=lifespan)

app.add_exception_handler(DuplicateNameError, duplicate_name_error_handler)
app.add_exception_handler(RecordNotFoundError, record_not_found_error_handler)

app.include_router(hotels_router)
