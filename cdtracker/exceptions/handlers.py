import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import DuplicateNameError, RecordNotFoundError

logger = logging.getLogger(__name__)


async def duplicate_name_error_handler(_request: Request, exc: DuplicateNameError) -> JSONResponse:
    logger.warning("Rejected duplicate hotel name: %r", exc.name)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message, "name": exc.name},
    )


async def record_not_found_error_handler(_request: Request, exc: RecordNotFoundError) -> JSONResponse:
    logger.warning("Hotel not found: %s", exc.record_id)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message},
    )
