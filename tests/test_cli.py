import pytest

from mhdflow.cli import main
from mhdflow.problems import problem_names


def _read_grid(path):
    return [line.split() for line in path.read_text().splitlines()]


def test_list_prints_every_problem(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    for name in problem_names():
        assert name in out


def test_sedov_small_run_writes_outputs(tmp_path, capsys):
    status = main(
        ["sedov", "--nx", "16", "--ny", "16", "--tend", "0.001", "-o", str(tmp_path)]
    )
    assert status == 0
    for name in ("bound-0.txt", "rho-0.txt", "p-0.txt", "rho.txt", "By.txt", "p_vs_t.txt"):
        assert (tmp_path / name).is_file()
    grid = _read_grid(tmp_path / "rho.txt")
    assert len(grid) == 16
    assert all(len(row) == 16 for row in grid)
    out = capsys.readouterr().out
    assert "Simulation ended at step" in out


def test_time_series_reaches_end_time(tmp_path):
    main(["mhd_shock", "--nx", "16", "--ny", "8", "--tend", "0.01", "-o", str(tmp_path)])
    lines = (tmp_path / "p_vs_t.txt").read_text().splitlines()
    times = [float(line.split(",")[0]) for line in lines]
    assert times == sorted(times)
    assert times[-1] >= 0.01
    assert len(lines) >= 1


def test_mhd_shock_default_probes(tmp_path):
    main(["mhd_shock", "--nx", "16", "--ny", "8", "--tend", "0.005", "-o", str(tmp_path)])
    for name in ("p_vs_t.txt", "rho_vs_t.txt", "By_vs_t.txt"):
        assert (tmp_path / name).is_file()
    assert not (tmp_path / "Bx_vs_t.txt").exists()


def test_mhd_shock_y_default_probes(tmp_path):
    main(["mhd_shock_y", "--nx", "8", "--ny", "16", "--tend", "0.005", "-o", str(tmp_path)])
    assert (tmp_path / "Bx_vs_t.txt").is_file()
    assert not (tmp_path / "By_vs_t.txt").exists()


def test_explicit_probe_replaces_defaults(tmp_path):
    main(
        [
            "reconnection", "--nx", "8", "--ny", "8", "--tend", "0.01",
            "--probe", "v", "-o", str(tmp_path),
        ]
    )
    assert (tmp_path / "v_vs_t.txt").is_file()
    assert not (tmp_path / "p_vs_t.txt").exists()


def test_snapshots_every_num_print_steps(tmp_path):
    main(
        [
            "mhd_shock", "--nx", "16", "--ny", "8", "--tend", "0.02",
            "--num-print", "1", "-o", str(tmp_path),
        ]
    )
    steps = len((tmp_path / "p_vs_t.txt").read_text().splitlines())
    assert (tmp_path / f"u-{steps}.txt").is_file()
    assert (tmp_path / "u-1.txt").is_file()


def test_unknown_problem_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["no_such_problem"])
    assert info.value.code == 2


def test_missing_problem_is_rejected():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_invalid_grid_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["sedov", "--nx", "2", "-o", str(tmp_path)])
    assert info.value.code == 2


def test_unknown_probe_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["sedov", "--probe", "T", "-o", str(tmp_path)])
    assert info.value.code == 2