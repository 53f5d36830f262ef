"""Experiment runners."""

from scripts.experiments.comparison import compare_with_sklearn

__all__ = [
    "compare_with_sklearn",
]
