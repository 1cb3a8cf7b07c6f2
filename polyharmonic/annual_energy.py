"""Annual energy from precomputed direction weights and efficiencies."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from polyharmonic.directions import _scan

_AREA_LABEL = "mirror_area_total:"

# Leading whitespace, then a decimal floating-point number.
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class AnnualEnergyFromPrecomputedData:
    """Computes annual energy from a weighted efficiency file.

    The first line must contain ``mirror_area_total: <area>``; every further
    line holds ``azimuth, elevation, weight, efficiency``. Lines that do not
    parse are skipped.
    """

    def __init__(self, filepath) -> None:
        self.filepath = filepath

    def compute_annual_energy_mwh(self) -> float:
        """Return the annual energy in MWh."""
        try:
            handle = open(Path(self.filepath), encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Failed to open file: {self.filepath}") from exc

        with handle:
            header = handle.readline().rstrip("\n").replace("\t", " ")
            mirror_area_total = 0.0
            pos = header.find(_AREA_LABEL)
            if pos != -1:
                match = _LEADING_NUMBER.match(header, pos + len(_AREA_LABEL))
                if match is not None:
                    mirror_area_total = float(match.group(1))
            if mirror_area_total <= 0.0:
                raise ValueError("Invalid or missing mirror_area_total in header.")

            weighted_sum = 0.0
            for line in handle:
                fields = _scan(line, "fcfcfcf")
                if fields is None:
                    continue
                _, _, weight, efficiency = fields
                weighted_sum += efficiency * weight

        return weighted_sum * mirror_area_total / 1_000_000.0


def main(argv=None) -> int:
    """Print the estimated annual energy for a precomputed data file."""
    parser = argparse.ArgumentParser(description="Estimate annual energy in MWh.")
    parser.add_argument("input_file", help="CSV with header and weighted efficiencies")
    args = parser.parse_args(argv)

    try:
        energy = AnnualEnergyFromPrecomputedData(args.input_file).compute_annual_energy_mwh()
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Estimated annual energy: {energy:g} MWh")
    return 0