"""
Utility helpers shared across routers/repositories.
"""

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def strict_loads(text: str | bytes) -> Any:
    """
    json.loads that refuses NaN/Infinity/-Infinity, which are not JSON and
    cannot be rendered back by JSONResponse.
    """
    return json.loads(text, parse_constant=_reject_constant)


def strict_load(fp) -> Any:
    return json.load(fp, parse_constant=_reject_constant)
