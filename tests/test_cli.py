import math

import pytest

from mcgreeks.cli import main

EXPECTED_FILES = [
    "DigitalPrice.dat",
    "DigitalDelta.dat",
    "DigitalGamma.dat",
    "DigitalVega.dat",
    "CorridorPrice.dat",
    "CorridorDelta.dat",
    "CorridorGamma.dat",
    "CorridorVega.dat",
    "AsianPrice.dat",
    "AsianDelta.dat",
]


def _run(tmp_path, capsys, seed=7, samples=5, subdir="out"):
    out = tmp_path / subdir
    status = main(["--seed", str(seed), "--samples", str(samples), "--output-dir", str(out)])
    captured = capsys.readouterr().out
    return status, captured, out


def _read_rows(path):
    return [line.split() for line in path.read_text().splitlines()]


def test_returns_zero_and_writes_all_files(tmp_path, capsys):
    status, _, out = _run(tmp_path, capsys)
    assert status == 0
    assert sorted(p.name for p in out.iterdir()) == sorted(EXPECTED_FILES)


def test_stdout_sections_in_order(tmp_path, capsys):
    _, captured, _ = _run(tmp_path, capsys)
    lines = captured.splitlines()
    titles = [line for line in lines if line.startswith("Option")]
    assert titles == ["Option Digitale", "Option Corridor", "Option Asiatique"]
    labels = [line.split(" : ")[0] for line in lines if " : " in line]
    assert labels == [
        "Monte Carlo", "Delta", "Gamma", "Vega",
        "Monte Carlo", "Delta", "Gamma", "Vega",
        "Monte Carlo", "Delta",
    ]


@pytest.mark.parametrize("name", EXPECTED_FILES)
def test_each_file_has_one_row_per_sample(tmp_path, capsys, name):
    _, _, out = _run(tmp_path, capsys, samples=6)
    rows = _read_rows(out / name)
    assert [row[0] for row in rows] == ["1", "2", "3", "4", "5", "6"]
    assert all(len(row) == 5 for row in rows)


def test_printed_estimate_matches_last_exported_mean(tmp_path, capsys):
    _, captured, out = _run(tmp_path, capsys, samples=8)
    printed = [line.split(" : ")[1] for line in captured.splitlines() if " : " in line]
    files = [
        "DigitalPrice.dat", "DigitalDelta.dat", "DigitalGamma.dat", "DigitalVega.dat",
        "CorridorPrice.dat", "CorridorDelta.dat", "CorridorGamma.dat", "CorridorVega.dat",
        "AsianPrice.dat", "AsianDelta.dat",
    ]
    for value, name in zip(printed, files):
        assert _read_rows(out / name)[-1][2] == value


def test_digital_price_samples_are_discounted_indicator(tmp_path, capsys):
    _, _, out = _run(tmp_path, capsys, samples=20)
    for row in _read_rows(out / "DigitalPrice.dat"):
        value = float(row[1])
        assert value == 0.0 or math.isclose(value, math.exp(-0.05), rel_tol=1e-5)


def test_corridor_price_samples_are_discounted_indicator(tmp_path, capsys):
    _, _, out = _run(tmp_path, capsys, samples=20)
    for row in _read_rows(out / "CorridorPrice.dat"):
        value = float(row[1])
        assert value == 0.0 or math.isclose(value, math.exp(-0.1), rel_tol=1e-5)


def test_asian_price_samples_are_non_negative(tmp_path, capsys):
    _, _, out = _run(tmp_path, capsys, samples=10)
    assert all(float(row[1]) >= 0.0 for row in _read_rows(out / "AsianPrice.dat"))


def test_same_seed_is_reproducible(tmp_path, capsys):
    _, first, out_a = _run(tmp_path, capsys, seed=42, subdir="a")
    _, second, out_b = _run(tmp_path, capsys, seed=42, subdir="b")
    assert first == second
    for name in EXPECTED_FILES:
        assert (out_a / name).read_text() == (out_b / name).read_text()


def test_first_row_mean_equals_value(tmp_path, capsys):
    _, _, out = _run(tmp_path, capsys)
    for name in EXPECTED_FILES:
        first = _read_rows(out / name)[0]
        assert first[1] == first[2]


@pytest.mark.parametrize("samples", ["0", "-3"])
def test_rejects_non_positive_samples(tmp_path, capsys, samples):
    with pytest.raises(SystemExit) as excinfo:
        main(["--samples", samples, "--output-dir", str(tmp_path)])
    assert excinfo.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err