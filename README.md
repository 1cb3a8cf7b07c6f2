# polyharmonic

Estimate the annual energy collected by a solar field from a small set of
sampled sun directions.

The method samples the band of the sky that the sun passes through over a
year. It builds a preconditioned polyharmonic spline interpolator over those
directions and turns its localized kernels into one weight for each sample
direction, using a time series of direct normal irradiance (DNI). After that,
the annual energy of any optical design is a weighted sum of its efficiencies
at the sample directions.

## Installation

```
pip install .
```

Install with the test extra to run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
polyharmonic-energy path/to/directions_with_weights_and_efficiency.csv
```

The input file starts with a header line that contains
`mirror_area_total: <area in m²>` (tabs in the header count as spaces). Each
following line has the form

```
azimuth, elevation, weight, efficiency
```

Data lines that do not parse are skipped. The command prints

```
Estimated annual energy: <value> MWh
```

where the value is the sum of `efficiency × weight` over all lines, multiplied
by the total mirror area and divided by 10⁶. If the file cannot be opened, or
the header has no positive `mirror_area_total`, it prints `Error: ...` to
standard error and exits with status 1.

The same calculation is available as
`polyharmonic.annual_energy.AnnualEnergyFromPrecomputedData(filepath).compute_annual_energy_mwh()`,
which raises `OSError` for an unreadable file and `ValueError` for a missing or
non-positive area.

## Library use

### Sample directions and weights

```python
from polyharmonic.sampling import (
    POLYHARMONIC_ORDER,
    generate_sample_directions,
    preconditioner,
    compute_weights,
    write_weights_csv,
)
from polyharmonic.interpolator import Interpolator
from polyharmonic.dni_series import DNISeries

directions = generate_sample_directions(37.4117, 23.4, 23.4 / 1.2)
interpolator = Interpolator(
    directions, [1.0] * len(directions), POLYHARMONIC_ORDER, preconditioner
)
kernels = interpolator.localized_kernels()

series = DNISeries("dni.csv").time_series()
weights = compute_weights(kernels, series, sun_direction)  # sun_direction: see below
write_weights_csv("weights.csv", directions, weights)
```

- `generate_sample_directions(latitude_deg, epsilon_deg, rho_deg)` spreads
  declinations evenly from `-epsilon` to `+epsilon` and, for each, hour angles
  evenly between sunrise and sunset, spaced close to the resolution `rho`.
  Its defaults are `DEFAULT_LATITUDE_DEG` (37.4117), `OBLIQUITY_DEG` (23.4)
  and `DEFAULT_RESOLUTION_DEG` (23.4 / 1.2). It raises `ValueError` for a
  non-positive resolution or when a declination has no sunrise at that
  latitude.
- `preconditioner(r)` is `1 + z`.
- `compute_weights(kernels, time_series, sun_direction)` adds up
  `dni × kernel(sun)` for every record in which the sun is above the horizon.
- `write_weights_csv(path, directions, weights)` writes
  `azimuth, elevation, weight` lines with six decimal places.

The DNI file has one record per line:
`year, month, day, hour, minute, second, dni`. Each record becomes a `UtcTime`
(`year`, `month`, `day`, `hours`, `minutes`, `seconds`) paired with its DNI
value. A `DNISeries` can also be iterated and measured with `len()`. A line
that does not parse raises `ValueError`.

### Interpolation

`Interpolator(sample_dirs, sample_efficiencies, order, preconditioner)` fits
amplitudes so that the preconditioned efficiencies are reproduced at the
sample directions. It uses the kernel `r^k` for odd orders and `r^k·log r`
otherwise, with value 0 at `r = 0` (see `kernel_function(r, order)`, which
also accepts numpy arrays).

- `interpolate(sun_dir)` gives the interpolated efficiency.
- `localized_kernels()` gives one function per sample direction, equal to 1 at
  its own direction and 0 at the others.
- The `amplitudes` property holds the fitted coefficients.

Mismatched numbers of directions and efficiencies raise `ValueError`.

### Directions

- `az_el_to_unit_vector(azimuth_deg, elevation_deg)` converts to an
  East-North-Zenith unit vector. Azimuth is measured from North toward East,
  and elevation above the horizon.
- `unit_vector_to_az_el(direction)` converts back, with azimuth in [0, 360).
- `load_az_el_efficiencies(path)` reads `azimuth, elevation, efficiency`
  lines and returns the directions and the efficiencies; a line that does not
  parse raises `ValueError`.

## What this package does not do

The package does not compute the sun's position. `compute_weights` needs a
`sun_direction` function, supplied by the caller, that maps each `UtcTime` to
the sun's East-North-Zenith unit vector. For the same reason there is no
command that generates a weights file from a DNI series; that step is done
through the library functions above.