"""Convenience helpers for running a percolation experiment end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .experiment import ExperimentConfig, ExperimentResult, PercolationExperiment


_OUTPUT_SUFFIXES = {".csv", ".xlsx"}


def run_experiment(
    output_path: str | Path | None = None,
    config: Optional[ExperimentConfig] = None,
) -> ExperimentResult | None:
    """Run the experiment described by `config` and write per-trial rows to `output_path`."""

    if output_path is not None:
        output_path = Path(output_path)
        if output_path.suffix.lower() not in _OUTPUT_SUFFIXES:
            print(f"ERROR: Unsupported output format for '{output_path}'. Please use a .csv or .xlsx path.")
            return None
        if not output_path.parent.exists():
            print(f"ERROR: Output directory '{output_path.parent}' does not exist.")
            return None

    experiment = PercolationExperiment(config or ExperimentConfig())
    try:
        return experiment.run(output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
