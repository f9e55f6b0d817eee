#!/usr/bin/env python3
"""
List the registrations stored in the JSON registration file.

Usage:
  python scripts/list_registrations.py [--data-dir data] [--json]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from confserver.core.config import get_settings
from confserver.repositories.json_storage import JsonStorage


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="List stored conference registrations")
    ap.add_argument("--data-dir", help="Directory holding registrations.json (default: DATA_DIR)")
    ap.add_argument("--json", action="store_true", help="Print the raw JSON array")
    args = ap.parse_args(argv)

    settings = get_settings()
    data_dir = Path(args.data_dir) if args.data_dir else settings.data_dir
    storage = JsonStorage(data_dir / "conference.json", data_dir / "registrations.json")
    registrations = storage.load_registrations()

    if args.json:
        print(json.dumps(registrations, ensure_ascii=False, indent=2))
        return
    print(f"{len(registrations)} registration(s) in {storage.registrations_file}")
    for idx, entry in enumerate(registrations, start=1):
        if not isinstance(entry, dict):
            print(f"  {idx}. <invalid entry>")
            continue
        print(f"  {idx}. {entry.get('name', '?')} <{entry.get('email', '?')}>")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
