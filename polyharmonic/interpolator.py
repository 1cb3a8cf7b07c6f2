"""Preconditioned polyharmonic spline interpolation on the unit sphere."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

Direction = np.ndarray
Preconditioner = Callable[[np.ndarray], float]


def _kernel_values(r: np.ndarray, order: int) -> np.ndarray:
    r = np.asarray(r, dtype=float)
    zero = r == 0.0
    safe = np.where(zero, 1.0, r)
    values = safe**order
    if not (order > 0 and order % 2 == 1):
        values = values * np.log(safe)
    return np.where(zero, 0.0, values)


def kernel_function(r, order: int):
    """Polyharmonic kernel: r**k for odd k, r**k * log(r) otherwise; 0 at r == 0."""
    values = _kernel_values(r, order)
    return float(values) if values.ndim == 0 else values


class Interpolator:
    """Interpolates sampled values over directions with a polyharmonic kernel.

    The sampled values are multiplied by the preconditioner before solving for
    the kernel amplitudes, and interpolated values are divided by it again.
    """

    def __init__(
        self,
        sample_dirs: Sequence[Direction],
        sample_efficiencies: Sequence[float],
        order: int,
        preconditioner: Preconditioner,
    ) -> None:
        if len(sample_dirs) != len(sample_efficiencies):
            raise ValueError("Mismatch in number of directions and efficiencies")

        self.order = order
        self._q = preconditioner
        self._nodes = np.array(sample_dirs, dtype=float).reshape(-1, 3)

        diffs = self._nodes[:, None, :] - self._nodes[None, :, :]
        self._kernel_matrix = _kernel_values(np.linalg.norm(diffs, axis=-1), order)

        values = np.array(
            [eff * preconditioner(node) for eff, node in zip(sample_efficiencies, self._nodes)],
            dtype=float,
        )
        if len(self._nodes):
            self._kernel_inverse = np.linalg.inv(self._kernel_matrix)
        else:
            self._kernel_inverse = np.zeros((0, 0))
        self._amplitudes = self._kernel_inverse @ values

    def _kernels_at(self, direction: np.ndarray) -> np.ndarray:
        return _kernel_values(np.linalg.norm(direction - self._nodes, axis=-1), self.order)

    def interpolate(self, sun_dir) -> float:
        """Return the interpolated value in the given direction."""
        direction = np.asarray(sun_dir, dtype=float)
        total = float(self._amplitudes @ self._kernels_at(direction))
        return total / self._q(direction)

    def localized_kernels(self) -> list[Callable[[np.ndarray], float]]:
        """Return one cardinal function per node: 1 at its node, 0 at the others."""
        return [self._localized(p) for p in range(len(self._nodes))]

    def _localized(self, p: int) -> Callable[[np.ndarray], float]:
        row = self._kernel_inverse[p].copy()
        q_node = self._q(self._nodes[p])

        def kernel(r) -> float:
            direction = np.asarray(r, dtype=float)
            total = float(row @ self._kernels_at(direction))
            return q_node / self._q(direction) * total

        return kernel

    @property
    def amplitudes(self) -> list[float]:
        """The solved kernel amplitudes, one per node."""
        return [float(a) for a in self._amplitudes]