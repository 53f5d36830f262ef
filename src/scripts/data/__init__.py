"""Data loading utilities."""

from scripts.data.datasets import load_csv, load_pmlb

__all__ = [
    "load_csv",
    "load_pmlb",
]
