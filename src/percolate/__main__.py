"""Command line entry point for the percolate library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .experiment import ExperimentConfig
from .runner import run_experiment


def _env_int(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate the site percolation threshold by Monte Carlo sampling.")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Optional .csv or .xlsx path where per-trial results will be written",
    )
    parser.add_argument(
        "--side",
        type=int,
        default=None,
        help="Number of sites per grid side, at least 5 (default: $PERCOLATE_SIDE or 200)",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=None,
        help="Number of independent trials (default: $PERCOLATE_TRIALS or 30)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible runs (default: $PERCOLATE_SEED)",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print errors",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        side = args.side if args.side is not None else _env_int("PERCOLATE_SIDE", 200)
        trials = args.trials if args.trials is not None else _env_int("PERCOLATE_TRIALS", 30)
        seed = args.seed if args.seed is not None else _env_int("PERCOLATE_SEED", None)
        config = ExperimentConfig(
            side=side,
            trials=trials,
            seed=seed,
            use_tqdm=not args.disable_tqdm and not args.quiet,
            verbose=not args.quiet,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    result = run_experiment(args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
