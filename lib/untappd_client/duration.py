from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator

from .decoding import decode_json


def time_unit_to_duration(magnitude: float, measure: str) -> timedelta:
    """Convert an API ``response_time`` pair into a ``timedelta``.

    Unknown units and magnitudes that do not form a valid duration give
    ``timedelta(0)``, so zero reads as "unknown" rather than "instant".
    """
    units = {
        "milliseconds": "milliseconds",
        "seconds": "seconds",
        "minutes": "minutes",
    }
    unit = units.get(measure)
    if unit is None:
        return timedelta(0)
    try:
        value = float(magnitude)
        if not math.isfinite(value):
            return timedelta(0)
        return timedelta(**{unit: value})
    except (TypeError, ValueError, OverflowError):
        return timedelta(0)


def _response_time(value: Any) -> Any:
    if isinstance(value, timedelta):
        return value
    if value is None:
        return timedelta(0)
    if not isinstance(value, Mapping):
        raise ValueError("response_time must be an object with time and measure")
    magnitude = value.get("time")
    if magnitude is None:
        magnitude = 0
    if isinstance(magnitude, bool) or not isinstance(magnitude, (int, float)):
        raise ValueError("response_time.time must be a number")
    measure = value.get("measure") or ""
    if not isinstance(measure, str):
        raise ValueError("response_time.measure must be a string")
    return time_unit_to_duration(magnitude, measure)


ResponseTime = Annotated[timedelta, BeforeValidator(_response_time)]


def parse_response_time(raw: bytes | str) -> timedelta:
    return _response_time(decode_json(raw))
