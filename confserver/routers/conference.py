from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from confserver.services.conference_service import (
    ConferenceService,
    ConferenceDataUnavailableError,
)

router = APIRouter(prefix="/api", tags=["conference"])
logger = logging.getLogger(__name__)


def _get_conference_service(request: Request) -> ConferenceService:
    svc = getattr(getattr(request.app, "state", None), "conference_service", None)
    if not svc:
        raise RuntimeError("ConferenceService not configured")
    return svc


@router.get("/data")
async def conference_data(request: Request):
    svc = _get_conference_service(request)
    try:
        document = await svc.get_document()
    except ConferenceDataUnavailableError:
        logger.exception("Error reading conference data")
        return JSONResponse({"message": "Error fetching conference data"}, status_code=500)
    return JSONResponse(document)
