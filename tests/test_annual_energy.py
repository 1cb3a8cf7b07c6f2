import pytest

from polyharmonic.annual_energy import AnnualEnergyFromPrecomputedData, main

DATA_LINES = "10, 20, 3.5, 0.8\n100, 40, 1.25, 0.6\n250, 60, 2.0, 0.9\n"


def _write(tmp_path, header, body=DATA_LINES, name="data.csv"):
    path = tmp_path / name
    path.write_text(header + "\n" + body)
    return path


def _energy(path):
    return AnnualEnergyFromPrecomputedData(path).compute_annual_energy_mwh()


def test_single_unit_line(tmp_path):
    path = _write(tmp_path, "mirror_area_total: 1000000", "0, 45, 1.0, 1.0\n")
    assert _energy(path) == pytest.approx(1.0)


def test_result_scales_with_area(tmp_path):
    small = _energy(_write(tmp_path, "mirror_area_total: 5000", name="a.csv"))
    large = _energy(_write(tmp_path, "mirror_area_total: 15000", name="b.csv"))
    assert large == pytest.approx(3.0 * small)


def test_malformed_lines_are_skipped(tmp_path):
    clean = _energy(_write(tmp_path, "mirror_area_total: 5000", name="a.csv"))
    noisy_body = "junk line\n" + DATA_LINES + "1, 2, x, 4\n\n"
    noisy = _energy(_write(tmp_path, "mirror_area_total: 5000", noisy_body, name="b.csv"))
    assert noisy == pytest.approx(clean)


def test_tabs_and_prefix_in_header(tmp_path):
    plain = _energy(_write(tmp_path, "mirror_area_total: 5000", name="a.csv"))
    tabbed = _energy(_write(tmp_path, "site\tmirror_area_total:\t5000", name="b.csv"))
    assert tabbed == pytest.approx(plain)


@pytest.mark.parametrize(
    "header",
    ["no area here", "mirror_area_total: 0", "mirror_area_total: -3", "mirror_area_total: abc", ""],
)
def test_invalid_header(tmp_path, header):
    with pytest.raises(ValueError, match="mirror_area_total"):
        _energy(_write(tmp_path, header))


def test_missing_file(tmp_path):
    with pytest.raises(OSError, match="Failed to open file"):
        _energy(tmp_path / "missing.csv")


def test_main_prints_energy(tmp_path, capsys):
    path = _write(tmp_path, "mirror_area_total: 1000000", "0, 45, 1.0, 1.0\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Estimated annual energy: 1 MWh"


def test_main_reports_error(tmp_path, capsys):
    path = _write(tmp_path, "nothing useful")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error: Invalid or missing mirror_area_total")