"""
JSON file persistence for conference metadata and registrations.

Both documents are read and written whole on every access; nothing is cached
between calls, so the files on disk stay the single source of truth.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import logging

from confserver.core.utils import strict_load

logger = logging.getLogger(__name__)


class JsonStorage:
    """File-backed store rooted at the configured data directory."""

    def __init__(self, conference_file: Path, registrations_file: Path) -> None:
        self.conference_file = Path(conference_file)
        self.registrations_file = Path(registrations_file)

    @classmethod
    def from_settings(cls, settings) -> "JsonStorage":
        return cls(settings.conference_file, settings.registrations_file)

    def read_conference(self) -> Any:
        """Parse the conference document. OSError/ValueError propagate to the caller."""
        with self.conference_file.open("r", encoding="utf-8") as f:
            return strict_load(f)

    def load_registrations(self) -> list[dict]:
        """Return the stored list, or [] when the file is absent or unusable."""
        try:
            with self.registrations_file.open("r", encoding="utf-8") as f:
                data = strict_load(f)
        except FileNotFoundError:
            logger.info("No existing registrations file at %s, starting a new one", self.registrations_file)
            return []
        except (OSError, ValueError) as exc:
            logger.warning("Could not read registrations from %s (%s); treating as empty", self.registrations_file, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Registrations file %s does not hold a JSON array; treating as empty", self.registrations_file)
            return []
        return data

    def save_registrations(self, registrations: list[dict]) -> None:
        self.registrations_file.parent.mkdir(parents=True, exist_ok=True)
        self.registrations_file.write_text(
            json.dumps(registrations, ensure_ascii=False, indent=2), encoding="utf-8"
        )
