"""Benchmarks for precision-tier dispatch.

Times the same catalogue function through its native kernel and through the
generic widen-evaluate-narrow adapter for every available tier.

Run with ``python -m specfunpy.benchmark.bench_tiers --function digamma``.
"""

from __future__ import annotations

import argparse
import logging
import os

import numpy as np
import pyperf

from specfunpy.catalogue import get_function, names
from specfunpy.dispatch import SpecialFunction
from specfunpy.precision import PrecisionTier


def _set_reproducible_thread_env() -> None:
    """Set conservative thread environment variables.

    Notes
    -----
    Uses ``os.environ.setdefault`` so user-provided values win.
    """
    defaults = {
        "OMP_NUM_THREADS": "1",
        "MKL_NUM_THREADS": "1",
        "OPENBLAS_NUM_THREADS": "1",
        "NUMBA_NUM_THREADS": "1",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


def _add_worker_args(cmd: list[str], args: argparse.Namespace) -> None:
    """Populate pyperf worker command-line arguments."""
    cmd.extend(["--function", args.function])
    cmd.extend(["--points", str(args.points)])
    cmd.extend(["--seed", str(args.seed)])
    if args.log_quiet:
        cmd.append("--log-quiet")


def _build_runner() -> tuple[pyperf.Runner, argparse.ArgumentParser]:
    """Create the pyperf runner and CLI parser."""
    parser = argparse.ArgumentParser(
        description="Benchmark native vs generic dispatch per precision tier",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--function",
        choices=names(),
        default="digamma",
        help="Single-argument catalogue function to time",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=64,
        help="Evaluation points per timed loop",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="RNG seed for deterministic evaluation points",
    )
    parser.add_argument(
        "--log-quiet",
        dest="log_quiet",
        action="store_true",
        help="Suppress library logging",
    )
    runner = pyperf.Runner(
        _argparser=parser,
        add_cmdline_args=_add_worker_args,
        processes=1,
        warmups=1,
    )
    return runner, parser


def main() -> None:
    """CLI entry point for the tier benchmark."""
    _set_reproducible_thread_env()
    runner, _ = _build_runner()
    args = runner.parse_args()

    if args.log_quiet:
        logging.getLogger("specfunpy").setLevel(logging.ERROR)

    function = get_function(args.function)
    if not isinstance(function, SpecialFunction) or len(function.parameters) != 1:
        raise SystemExit(f"{args.function} is not a single-argument function")

    rng = np.random.default_rng(args.seed)
    # positive points avoid the poles of digamma/gamma
    points = rng.uniform(0.1, 0.9, size=args.points)

    for tier in PrecisionTier:
        if not tier.available:
            continue
        values = [tier.cast(x) for x in points]

        def _bench_generic(values=values) -> None:
            for x in values:
                function.generic(x)

        runner.bench_func(f"{args.function}_generic_{tier.value}", _bench_generic)

        if tier in function.tiers:
            native = function.native(tier)

            def _bench_native(values=values, native=native) -> None:
                for x in values:
                    native(x)

            runner.bench_func(f"{args.function}_native_{tier.value}", _bench_native)


if __name__ == "__main__":
    main()
