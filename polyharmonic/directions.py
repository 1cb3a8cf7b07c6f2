"""Direction conversions and loading of sampled efficiencies."""

from __future__ import annotations

import math
import re
from pathlib import Path

import numpy as np

_FLOAT_FIELD = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_FIELD = re.compile(r"\s*([+-]?\d+)")
_CHAR_FIELD = re.compile(r"\s*(\S)")
_FIELD_KINDS = {
    "f": (_FLOAT_FIELD, float),
    "i": (_INT_FIELD, int),
    "c": (_CHAR_FIELD, None),
}


def _scan(line: str, pattern: str) -> tuple | None:
    """Read fields from the start of a line, stream-extraction style.

    ``pattern`` is a sequence of ``f`` (float), ``i`` (integer) and ``c``
    (any single non-blank delimiter character). Leading whitespace before
    each field is skipped and trailing text is ignored. Returns the numeric
    fields, or None when the line does not match.
    """
    values = []
    pos = 0
    for kind in pattern:
        regex, convert = _FIELD_KINDS[kind]
        match = regex.match(line, pos)
        if match is None:
            return None
        pos = match.end()
        if convert is not None:
            values.append(convert(match.group(1)))
    return tuple(values)


def az_el_to_unit_vector(azimuth_deg: float, elevation_deg: float) -> np.ndarray:
    """Return the East-North-Zenith unit vector for azimuth/elevation in degrees.

    Azimuth is measured from North toward East, elevation above the horizon.
    """
    az = math.radians(azimuth_deg)
    el = math.radians(elevation_deg)
    return np.array(
        [
            math.sin(az) * math.cos(el),
            math.cos(az) * math.cos(el),
            math.sin(el),
        ]
    )


def unit_vector_to_az_el(direction) -> tuple[float, float]:
    """Return (azimuth, elevation) in degrees for an ENZ unit vector.

    The azimuth lies in [0, 360).
    """
    x, y, z = (float(c) for c in direction)
    elevation = math.degrees(math.asin(min(1.0, max(-1.0, z))))
    azimuth = math.degrees(math.atan2(x, y))
    if azimuth < 0.0:
        azimuth += 360.0
    return azimuth, elevation


def load_az_el_efficiencies(path) -> tuple[list[np.ndarray], list[float]]:
    """Read ``azimuth, elevation, efficiency`` lines into directions and efficiencies."""
    try:
        handle = open(Path(path), encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to open file: {path}") from exc

    directions: list[np.ndarray] = []
    efficiencies: list[float] = []
    with handle:
        for raw in handle:
            line = raw.rstrip("\n")
            fields = _scan(line, "fcfcf")
            if fields is None:
                raise ValueError(f"Malformed line: {line}")
            azimuth, elevation, efficiency = fields
            directions.append(az_el_to_unit_vector(azimuth, elevation))
            efficiencies.append(efficiency)
    return directions, efficiencies