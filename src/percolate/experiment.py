"""Monte Carlo estimation of the site percolation threshold."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd
from tqdm import tqdm

from .simulation import MIN_SIDE, PercolationSimulation


@dataclass
class ExperimentStats:
    """Summary metrics for an experiment run."""

    trials: int
    side: int
    mean: float
    stddev: float
    confidence_low: float
    confidence_high: float
    percolating_at_threshold: int
    runtime_seconds: float


@dataclass
class ExperimentResult:
    """Result bundle returned by :class:PercolationExperiment."""

    dataframe: pd.DataFrame
    stats: ExperimentStats


@dataclass
class ExperimentConfig:
    """Configuration parameters for :class:PercolationExperiment."""

    side: int = 200
    trials: int = 30
    seed: int | None = None
    confidence: float = 1.96  # z-score, 95%
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.side < MIN_SIDE:
            raise ValueError(f"side must be greater than or equal to {MIN_SIDE}")
        if self.trials < 1:
            raise ValueError("trials must be at least 1")
        if self.seed is None and os.getenv("PERCOLATE_SEED"):
            self.seed = int(os.environ["PERCOLATE_SEED"])


class PercolationExperiment:
    """Run independent percolation trials and summarize when they percolate."""

    def __init__(self, config: ExperimentConfig | None = None) -> None:
        self.config = config or ExperimentConfig()

    def run(self, output_path: str | Path | None = None) -> ExperimentResult:
        """Run all trials, optionally save per-trial rows, and return the summary."""

        config = self.config
        verbose = config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Percolation Experiment Started ---")
            print(f"\n1. Running {config.trials} trials on a {config.side}x{config.side} grid...")

        t0 = time.time()
        seeds = np.random.SeedSequence(config.seed).spawn(config.trials)
        iterator: Iterable[int] = range(config.trials)
        if config.trials > 1 and self._use_tqdm:
            iterator = tqdm(iterator, desc="   Trials", unit="trial")

        rows: List[Dict[str, object]] = []
        for trial in iterator:
            rng = np.random.default_rng(seeds[trial])
            rows.append({"trial": trial, **self._run_trial(rng)})
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Computing threshold statistics...")
        df = pd.DataFrame(rows, columns=["trial", "side", "open_sites", "open_fraction", "percolating_at_threshold"])
        fractions = df["open_fraction"].to_numpy(dtype=float)
        mean = float(np.mean(fractions))
        stddev = float(np.std(fractions, ddof=1)) if len(fractions) > 1 else 0.0
        margin = config.confidence * stddev / np.sqrt(len(fractions))
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Trial results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = ExperimentStats(
            trials=config.trials,
            side=config.side,
            mean=mean,
            stddev=stddev,
            confidence_low=float(mean - margin),
            confidence_high=float(mean + margin),
            percolating_at_threshold=int(df["percolating_at_threshold"].sum()),
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Mean threshold:          {summary.mean:.6f}")
            print(f"   - Standard deviation:      {summary.stddev:.6f}")
            print(f"   - Confidence interval:     [{summary.confidence_low:.6f}, {summary.confidence_high:.6f}]")
            print(
                f"   - Percolating at p*={PercolationSimulation.PERCOLATION_THRESHOLD}: "
                f"{summary.percolating_at_threshold}/{summary.trials}"
            )
            print(f"\n--- Percolation Experiment Finished in {elapsed:.2f} seconds ---")

        return ExperimentResult(dataframe=df, stats=summary)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm
        return self.config.verbose

    def _run_trial(self, rng: np.random.Generator) -> Dict[str, object]:
        simulation = PercolationSimulation(self.config.side, rng=rng)
        threshold = PercolationSimulation.PERCOLATION_THRESHOLD
        at_threshold: bool | None = None
        while not simulation.is_percolating:
            if simulation.open_random_site() is None:
                break
            if at_threshold is None and simulation.open_fraction > threshold:
                at_threshold = simulation.is_percolating
        if at_threshold is None:
            at_threshold = True
        return {
            "side": simulation.side,
            "open_sites": simulation.open_count,
            "open_fraction": simulation.open_fraction,
            "percolating_at_threshold": at_threshold,
        }

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix == ".xlsx":
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "ExperimentConfig",
    "ExperimentResult",
    "ExperimentStats",
    "PercolationExperiment",
]
