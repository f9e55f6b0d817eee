"""
Configuration helpers for the conference backend.

Every environment variable is read here, once, into a frozen Settings object
so that routers/services receive paths and policies explicitly instead of
consulting os.environ on their own.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]

CORS_MODES = ("allowlist", "permissive")

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5173",
    "https://icaebms-2026.netlify.app",
    "https://confworld-client-1.onrender.com",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    data_dir: Path
    client_dist_dir: Path
    cors_mode: str
    cors_allowed_origins: tuple[str, ...]
    log_level: str

    @property
    def conference_file(self) -> Path:
        return self.data_dir / "conference.json"

    @property
    def registrations_file(self) -> Path:
        return self.data_dir / "registrations.json"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _origins(value: str | None) -> tuple[str, ...]:
        if value is None:
            return DEFAULT_ALLOWED_ORIGINS
        items = (item.strip().rstrip("/") for item in value.split(","))
        return tuple(item for item in items if item)

    cors_mode = (os.getenv("CORS_MODE") or "allowlist").strip().lower()
    if cors_mode not in CORS_MODES:
        raise ValueError(f"CORS_MODE must be one of {', '.join(CORS_MODES)}, got {cors_mode!r}")

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3001"), 3001),
        data_dir=Path(os.getenv("DATA_DIR") or ROOT / "data"),
        client_dist_dir=Path(os.getenv("CLIENT_DIST_DIR") or ROOT.parent / "client" / "dist"),
        cors_mode=cors_mode,
        cors_allowed_origins=_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
