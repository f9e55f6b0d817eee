"""Read-only access to the conference document."""

from __future__ import annotations

from typing import Any

from starlette.concurrency import run_in_threadpool

from confserver.repositories.json_storage import JsonStorage


class ConferenceDataUnavailableError(Exception):
    """Raised when the conference document is missing, unreadable or not JSON."""


class ConferenceService:
    def __init__(self, storage: JsonStorage) -> None:
        self.storage = storage

    async def get_document(self) -> Any:
        try:
            return await run_in_threadpool(self.storage.read_conference)
        except (OSError, ValueError) as exc:
            raise ConferenceDataUnavailableError(str(exc)) from exc
