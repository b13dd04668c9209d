"""percolate library initialization."""

from .structures import DisjointSetForest
from .simulation import MIN_SIDE, PercolationSimulation
from .experiment import ExperimentConfig, ExperimentResult, ExperimentStats, PercolationExperiment
from .runner import run_experiment

__all__ = [
    "DisjointSetForest",
    "PercolationSimulation",
    "MIN_SIDE",
    "ExperimentConfig",
    "ExperimentResult",
    "ExperimentStats",
    "PercolationExperiment",
    "run_experiment",
]
