"""Dataset loading utilities producing (features, labels) for bdt."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
from pmlb import fetch_data


def load_csv(
    path: str | Path,
    label_column: str,
    *,
    feature_columns: list[str] | None = None,
    drop_columns: tuple[str, ...] = ("Id",),
    shuffle: bool = True,
    rng: np.random.Generator | int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Load a labelled dataset from a CSV file.

    Args:
        path: Path of the CSV file (with a header row)
        label_column: Column holding the class labels (e.g. "Species" for Iris)
        feature_columns: Columns to use as features. If None, every column
            except the label column and drop_columns is used.
        drop_columns: Columns ignored when feature_columns is None
        shuffle: Shuffle the rows before returning them
        rng: Random generator or seed used for shuffling

    Returns:
        Tuple of (features, labels) as numpy arrays, rows aligned
    """
    df = pd.read_csv(path)
    if label_column not in df.columns:
        raise KeyError(f"Label column {label_column!r} not found in {path}")

    if feature_columns is None:
        feature_columns = [
            c for c in df.columns if c != label_column and c not in drop_columns
        ]

    if shuffle:
        order = np.random.default_rng(rng).permutation(len(df))
        df = df.iloc[order].reset_index(drop=True)

    features = df[feature_columns].to_numpy(dtype=np.float64)
    labels = df[label_column].to_numpy()
    return features, labels


def load_pmlb(
    name: str,
    *,
    cache_dir: str | Path = ".cache",
) -> tuple[np.ndarray, np.ndarray]:
    """
    Fetch a dataset from PMLB.

    Args:
        name: Name of the PMLB dataset to fetch (e.g. "iris")
        cache_dir: Local directory caching downloaded datasets

    Returns:
        Tuple of (features, labels) as numpy arrays
    """
    features, labels = fetch_data(name, return_X_y=True, local_cache_dir=str(cache_dir))
    return np.asarray(features, dtype=np.float64), np.asarray(labels)
