from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

REQUIRED_FIELDS = ("name", "email")


def is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


@dataclass(frozen=True)
class Registration:
    """A submitted registration: two required strings plus whatever else the caller sent."""

    name: str
    email: str
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Registration":
        if not all(is_filled(payload.get(key)) for key in REQUIRED_FIELDS):
            raise ValueError("name and email must be non-empty strings")
        extra = {k: v for k, v in payload.items() if k not in REQUIRED_FIELDS}
        return cls(name=payload["name"], email=payload["email"], extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email, **self.extra}
