"""Sample directions along the sun's path and their DNI-weighted kernels."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import numpy as np

from polyharmonic.directions import unit_vector_to_az_el

DEFAULT_LATITUDE_DEG = 37.4117
OBLIQUITY_DEG = 23.4
DEFAULT_RESOLUTION_DEG = OBLIQUITY_DEG / 1.2
POLYHARMONIC_ORDER = 6


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def generate_sample_directions(
    latitude_deg: float = DEFAULT_LATITUDE_DEG,
    epsilon_deg: float = OBLIQUITY_DEG,
    rho_deg: float = DEFAULT_RESOLUTION_DEG,
) -> list[np.ndarray]:
    """Return ENZ unit vectors covering the sky region the sun can reach.

    Declinations run evenly from -epsilon to +epsilon; for each, hour angles
    run evenly between sunrise and sunset at the given latitude, with a
    spacing close to the angular resolution rho.
    """
    phi = math.radians(latitude_deg)
    epsilon = math.radians(epsilon_deg)
    rho = math.radians(rho_deg)
    if rho <= 0.0:
        raise ValueError("Angular resolution must be positive")

    rows = _round_half_away(2 * epsilon / rho)
    delta_step = 2 * epsilon / rows if rows else 0.0

    directions: list[np.ndarray] = []
    for n in range(rows + 1):
        delta = -epsilon + n * delta_step
        cos_omega = -math.tan(phi) * math.tan(delta)
        if not -1.0 <= cos_omega <= 1.0:
            raise ValueError(
                f"No sunrise hour angle at latitude {latitude_deg} for declination "
                f"{math.degrees(delta)}"
            )
        omega_max = math.acos(cos_omega)
        columns = 2 * _round_half_away(omega_max / rho)
        omega_step = 2 * omega_max / columns if columns else 0.0

        for m in range(columns + 1):
            omega = -omega_max + m * omega_step
            vector = np.array(
                [
                    -math.sin(omega) * math.cos(delta),
                    math.cos(phi) * math.sin(delta)
                    - math.sin(phi) * math.cos(omega) * math.cos(delta),
                    math.sin(phi) * math.sin(delta)
                    + math.cos(phi) * math.cos(omega) * math.cos(delta),
                ]
            )
            directions.append(vector / np.linalg.norm(vector))
    return directions


def preconditioner(r) -> float:
    """Preconditioning factor 1 + z for an ENZ direction."""
    return 1.0 + float(r[2])


def compute_weights(
    kernels: Sequence[Callable[[np.ndarray], float]],
    time_series: Iterable[tuple[object, float]],
    sun_direction: Callable[[object], np.ndarray],
) -> list[float]:
    """Accumulate DNI times each kernel's value at the sun direction.

    ``sun_direction`` maps a time to an ENZ unit vector; samples with the sun
    at or below the horizon are skipped.
    """
    weights = [0.0] * len(kernels)
    for time, dni in time_series:
        sun_dir = np.asarray(sun_direction(time), dtype=float)
        if sun_dir[2] <= 0.0:
            continue
        weights = [w + dni * kernel(sun_dir) for w, kernel in zip(weights, kernels)]
    return weights


def write_weights_csv(path, directions: Sequence, weights: Sequence[float]) -> None:
    """Write ``azimuth, elevation, weight`` lines with six decimals."""
    if len(directions) != len(weights):
        raise ValueError("Mismatch in number of directions and weights")
    with open(Path(path), "w", encoding="utf-8") as out:
        for direction, weight in zip(directions, weights):
            azimuth, elevation = unit_vector_to_az_el(direction)
            out.write(f"{azimuth:.6f}, {elevation:.6f}, {weight:.6f}\n")