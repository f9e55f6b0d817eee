from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from confserver.core.utils import strict_loads
from confserver.services.registration_service import (
    RegistrationService,
    InvalidRegistrationError,
    RegistrationStorageError,
)

router = APIRouter(prefix="/api", tags=["registrations"])
logger = logging.getLogger(__name__)


def _get_registration_service(request: Request) -> RegistrationService:
    svc = getattr(getattr(request.app, "state", None), "registration_service", None)
    if not svc:
        raise RuntimeError("RegistrationService not configured")
    return svc


@router.post("/register", status_code=201)
async def register(request: Request):
    try:
        payload = strict_loads(await request.body())
    except ValueError:
        return JSONResponse({"message": "Request body must be a JSON object"}, status_code=400)
    if not isinstance(payload, dict):
        return JSONResponse({"message": "Request body must be a JSON object"}, status_code=400)
    svc = _get_registration_service(request)
    try:
        record = await svc.register(payload)
    except InvalidRegistrationError:
        return JSONResponse({"message": "Name and Email are required"}, status_code=400)
    except RegistrationStorageError:
        logger.exception("Error saving registration")
        return JSONResponse({"message": "Error saving registration"}, status_code=500)
    return {"message": "Registration successful!", "data": record}
