import math

import numpy as np
import pytest

from polyharmonic.directions import az_el_to_unit_vector
from polyharmonic.interpolator import Interpolator, kernel_function

ANGLES = [(0, 10), (90, 30), (180, 50), (270, 20), (45, 70), (135, 5)]
EFFICIENCIES = [0.8, 0.6, 0.9, 0.7, 0.95, 0.5]


def _dirs():
    return [az_el_to_unit_vector(az, el) for az, el in ANGLES]


def _q(r):
    return 1.0 + r[2]


def test_kernel_zero_at_origin():
    assert kernel_function(0.0, 3) == 0.0
    assert kernel_function(0.0, 6) == 0.0


def test_kernel_odd_order_is_power():
    assert kernel_function(2.0, 3) == pytest.approx(8.0)


def test_kernel_even_order_has_log_factor():
    assert kernel_function(math.e, 2) == pytest.approx(math.e**2)
    assert kernel_function(1.0, 6) == 0.0


def test_kernel_accepts_arrays():
    values = kernel_function(np.array([0.0, 2.0]), 1)
    assert np.allclose(values, [0.0, 2.0])


def test_mismatched_lengths():
    with pytest.raises(ValueError, match="Mismatch"):
        Interpolator(_dirs(), [1.0], 3, _q)


@pytest.mark.parametrize("order", [1, 3])
def test_reproduces_samples_at_nodes(order):
    interp = Interpolator(_dirs(), EFFICIENCIES, order, _q)
    for node, eff in zip(_dirs(), EFFICIENCIES):
        assert interp.interpolate(node) == pytest.approx(eff, abs=1e-8)


@pytest.mark.parametrize("order", [1, 3])
def test_localized_kernels_are_cardinal(order):
    interp = Interpolator(_dirs(), EFFICIENCIES, order, _q)
    kernels = interp.localized_kernels()
    assert len(kernels) == len(ANGLES)
    for p, kernel in enumerate(kernels):
        for j, node in enumerate(_dirs()):
            expected = 1.0 if p == j else 0.0
            assert kernel(node) == pytest.approx(expected, abs=1e-8)


def test_kernels_combine_to_interpolant():
    interp = Interpolator(_dirs(), EFFICIENCIES, 3, _q)
    kernels = interp.localized_kernels()
    probe = az_el_to_unit_vector(222.0, 40.0)
    combined = sum(eff * k(probe) for eff, k in zip(EFFICIENCIES, kernels))
    assert combined == pytest.approx(interp.interpolate(probe), abs=1e-9)


def test_amplitudes_reproduce_preconditioned_values():
    dirs = _dirs()
    interp = Interpolator(dirs, EFFICIENCIES, 3, _q)
    amps = interp.amplitudes
    assert len(amps) == len(dirs)
    for node, eff in zip(dirs, EFFICIENCIES):
        total = sum(
            a * kernel_function(float(np.linalg.norm(node - other)), 3)
            for a, other in zip(amps, dirs)
        )
        assert total == pytest.approx(eff * _q(node), abs=1e-8)


def test_constant_preconditioner_matches_unpreconditioned_scale():
    dirs = _dirs()
    plain = Interpolator(dirs, EFFICIENCIES, 3, lambda r: 1.0)
    scaled = Interpolator(dirs, EFFICIENCIES, 3, lambda r: 2.0)
    probe = az_el_to_unit_vector(10.0, 60.0)
    assert scaled.interpolate(probe) == pytest.approx(plain.interpolate(probe))
    assert np.allclose(scaled.amplitudes, 2.0 * np.array(plain.amplitudes))