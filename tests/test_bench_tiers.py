import os

import pytest

pytest.importorskip("pyperf")

from specfunpy.benchmark import bench_tiers


def test_thread_env_defaults_do_not_override(monkeypatch):
    monkeypatch.setenv("OMP_NUM_THREADS", "4")
    monkeypatch.delenv("NUMBA_NUM_THREADS", raising=False)
    bench_tiers._set_reproducible_thread_env()
    assert os.environ["OMP_NUM_THREADS"] == "4"
    assert os.environ["NUMBA_NUM_THREADS"] == "1"


def test_worker_args_round_trip():
    _, parser = bench_tiers._build_runner()
    args = parser.parse_args(["--function", "gamma", "--points", "8", "--log-quiet"])
    cmd = []
    bench_tiers._add_worker_args(cmd, args)
    assert cmd == ["--function", "gamma", "--points", "8", "--seed", "0", "--log-quiet"]
