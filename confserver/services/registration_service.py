"""Registration use cases (validation, serialized append)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from starlette.concurrency import run_in_threadpool

from confserver.domain.registrations import Registration
from confserver.repositories.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class RegistrationError(Exception):
    """Base exception for the registration workflow."""


class InvalidRegistrationError(RegistrationError):
    """Raised when the payload lacks a usable name or email."""


class RegistrationStorageError(RegistrationError):
    """Raised when the updated list could not be written back."""


class RegistrationService:
    """Validates submissions and appends them to the registration store."""

    def __init__(self, storage: JsonStorage) -> None:
        self.storage = storage
        # one writer at a time; the store is rewritten whole on every append
        self._lock = asyncio.Lock()

    def validate(self, payload: Any) -> Registration:
        if not isinstance(payload, dict):
            raise InvalidRegistrationError("Registration payload must be an object")
        try:
            return Registration.from_payload(payload)
        except ValueError as exc:
            raise InvalidRegistrationError(str(exc)) from exc

    async def register(self, payload: Any) -> dict[str, Any]:
        record = self.validate(payload).to_dict()
        async with self._lock:
            registrations = await run_in_threadpool(self.storage.load_registrations)
            registrations.append(record)
            try:
                await run_in_threadpool(self.storage.save_registrations, registrations)
            except (OSError, TypeError, ValueError) as exc:
                raise RegistrationStorageError(f"Could not write {self.storage.registrations_file}") from exc
        logger.info("Stored registration for %s (%d total)", record["email"], len(registrations))
        return record
