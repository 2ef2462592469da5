from __future__ import annotations

import importlib.util
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import pytest

from american_flag_sort import benchmark_american_flag, main, parse_args


def _load_svg_script() -> Any:
    path = Path(__file__).resolve().parents[1] / "scripts" / "generate_performance_svg.py"
    spec = importlib.util.spec_from_file_location("generate_performance_svg", path)
    assert spec and spec.loader, f"could not load spec from {path}"
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


svg_script = _load_svg_script()


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.n == 100_000
    assert args.max_value == 10**9
    assert args.seed is None
    assert not (args.verify or args.sample or args.benchmark)


def test_main_sorts_and_verifies(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--n", "500", "--seed", "1", "--verify"]) == 0
    assert "Sorted 500 integers in" in capsys.readouterr().out


def test_main_sample_prints_passes(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sample", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Unsorted: [")
    assert "Sorted array: [" in out


def test_main_benchmark_mode(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    calls = {}

    def fake_benchmark(**kwargs: Any) -> dict:
        calls.update(kwargs)
        return {}

    monkeypatch.setattr("american_flag_sort.benchmark_american_flag", fake_benchmark)
    assert main(["--benchmark", "--seed", "5", "--max-value", "99"]) == 0
    assert calls == {"max_value": 99, "seed": 5}


def test_benchmark_returns_timings_per_series() -> None:
    timings = benchmark_american_flag(sizes=(10, 200), max_value=10**6, seed=11, verbose=False)
    assert set(timings) == {"american flag", "timsort (sorted)"}
    for series in timings.values():
        assert [n for n, _ in series] == [10, 200]
        assert all(t >= 0 for _, t in series)


def test_benchmark_prints_when_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    benchmark_american_flag(sizes=(50,), seed=2)
    out = capsys.readouterr().out
    assert "=== American Flag Sort Performance ===" in out
    assert "50  ->  time =" in out


def test_render_svg_is_well_formed() -> None:
    doc = svg_script.render_svg(
        {
            "american flag": [(1_000, 0.01), (10_000, 0.12)],
            "timsort (sorted)": [(1_000, 0.0), (10_000, 0.001)],
        }
    )
    root = ET.fromstring(doc)
    assert root.tag.endswith("svg")
    assert doc.count("<polyline") == 2
    assert "timsort (sorted): n=10,000" in doc


def test_render_svg_single_size() -> None:
    doc = svg_script.render_svg({"american flag": [(100, 0.5)]})
    ET.fromstring(doc)


def test_render_svg_rejects_empty() -> None:
    with pytest.raises(ValueError, match="No timings"):
        svg_script.render_svg({})


def test_log10_rejects_non_positive() -> None:
    with pytest.raises(ValueError):
        svg_script.log10(0)


def test_svg_script_writes_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "img" / "perf.svg"
    svg_script.main(["--sizes", "20", "40", "--seed", "4", "--out", str(out)])
    assert out.read_text().startswith("<svg")
    assert f"Wrote {out}" in capsys.readouterr().out
