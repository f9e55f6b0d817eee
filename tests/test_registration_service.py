from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import pytest

# Make the confserver package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from confserver.domain.registrations import Registration  # noqa: E402
from confserver.repositories.json_storage import JsonStorage  # noqa: E402
from confserver.services.registration_service import (  # noqa: E402
    InvalidRegistrationError,
    RegistrationService,
    RegistrationStorageError,
)


@pytest.fixture()
def storage(tmp_path):
    return JsonStorage(tmp_path / "conference.json", tmp_path / "registrations.json")


def test_registration_splits_required_and_extra_fields():
    reg = Registration.from_payload({"name": "Alice", "email": "a@x.com", "country": "PT"})

    assert reg.name == "Alice"
    assert reg.email == "a@x.com"
    assert reg.extra == {"country": "PT"}
    assert reg.to_dict() == {"name": "Alice", "email": "a@x.com", "country": "PT"}


def test_registration_keeps_values_untrimmed():
    reg = Registration.from_payload({"name": " Alice ", "email": "a@x.com"})

    assert reg.to_dict()["name"] == " Alice "


@pytest.mark.parametrize("payload", [None, [], "Alice", {"name": "Alice", "email": None}])
def test_validate_rejects_unusable_payloads(storage, payload):
    svc = RegistrationService(storage)

    with pytest.raises(InvalidRegistrationError):
        svc.validate(payload)


def test_register_appends_and_returns_record(storage):
    svc = RegistrationService(storage)

    record = asyncio.run(svc.register({"name": "Alice", "email": "a@x.com"}))

    assert record == {"name": "Alice", "email": "a@x.com"}
    assert storage.load_registrations() == [record]


def test_invalid_payload_does_not_touch_store(storage):
    svc = RegistrationService(storage)

    with pytest.raises(InvalidRegistrationError):
        asyncio.run(svc.register({"name": "Alice"}))

    assert not storage.registrations_file.exists()


def test_concurrent_submissions_are_all_kept(storage):
    svc = RegistrationService(storage)
    payloads = [{"name": f"user{i}", "email": f"user{i}@x.com"} for i in range(25)]

    async def submit_all():
        await asyncio.gather(*(svc.register(p) for p in payloads))

    asyncio.run(submit_all())

    stored = storage.load_registrations()
    assert len(stored) == len(payloads)
    assert sorted(r["email"] for r in stored) == sorted(p["email"] for p in payloads)


def test_write_failure_is_reported(storage):
    storage.registrations_file.mkdir()
    svc = RegistrationService(storage)

    with pytest.raises(RegistrationStorageError):
        asyncio.run(svc.register({"name": "Alice", "email": "a@x.com"}))


def test_non_array_store_is_replaced(storage):
    storage.registrations_file.write_text(json.dumps({"name": "legacy"}), encoding="utf-8")
    svc = RegistrationService(storage)

    asyncio.run(svc.register({"name": "Alice", "email": "a@x.com"}))

    assert storage.load_registrations() == [{"name": "Alice", "email": "a@x.com"}]
