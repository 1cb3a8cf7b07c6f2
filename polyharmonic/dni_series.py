"""Direct normal irradiance time series read from text files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from polyharmonic.directions import _scan


@dataclass(frozen=True)
class UtcTime:
    """A UTC calendar date and time of day."""

    year: int
    month: int
    day: int
    hours: float
    minutes: float
    seconds: float


class DNISeries:
    """A series of (time, DNI) samples.

    Each line holds year, month, day, hour, minute, second and DNI, separated
    by single delimiter characters.
    """

    def __init__(self, path) -> None:
        try:
            handle = open(Path(path), encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Could not open DNI file: {path}") from exc

        self._data: list[tuple[UtcTime, float]] = []
        with handle:
            for raw in handle:
                line = raw.rstrip("\n")
                fields = _scan(line, "icicicicicicf")
                if fields is None:
                    raise ValueError(f"Malformed line: {line}")
                year, month, day, hour, minute, second, dni = fields
                time = UtcTime(year, month, day, float(hour), float(minute), float(second))
                self._data.append((time, dni))

    def time_series(self) -> list[tuple[UtcTime, float]]:
        """Return a copy of the (time, DNI) samples in file order."""
        return list(self._data)

    def __iter__(self) -> Iterator[tuple[UtcTime, float]]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)