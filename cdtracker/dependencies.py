from typing import Annotated

from fastapi import Depends, Request

from cdtracker.services.tracker import TrackerService


def get_tracker_service(request: Request) -> TrackerService:
    return request.app.state.tracker_service


TrackerDep = Annotated[TrackerService, Depends(get_tracker_service)]
