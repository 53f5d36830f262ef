"""Comparison experiment between bdt models and their sklearn counterparts."""

from __future__ import annotations

import time
from typing import Any

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from scripts.table import compute_column_widths, print_header, print_row
from scripts.training.bdt_models import train_adaboost, train_tree
from scripts.training.sklearn_dt import train_sklearn_adaboost, train_sklearn_dt


def compare_with_sklearn(
    features: np.ndarray,
    labels: np.ndarray,
    *,
    max_depths: list[int] | None = None,
    iterations: int = 50,
    boost_depth: int = 1,
    max_alpha: float = 2.5,
    train_size: float = 0.8,
    random_state: int = 42,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Compare bdt decision trees and AdaBoost with sklearn on the same split.

    Args:
        features: Feature matrix
        labels: Label vector
        max_depths: Tree depths to compare (default: 1, 3, 5)
        iterations: Number of boosting iterations for both AdaBoost models
        boost_depth: Depth of the trees inside AdaBoost
        max_alpha: Cap on each bdt AdaBoost tree's vote weight
        train_size: Fraction for training split
        random_state: Random seed for the split and resampling
        verbose: Print bdt AdaBoost progress

    Returns:
        DataFrame with one row per model
    """
    if max_depths is None:
        max_depths = [1, 3, 5]

    X_train, X_test, y_train, y_test = train_test_split(
        features, labels, train_size=train_size, random_state=random_state
    )
    print(f"Train set: {len(X_train)} samples | Test set: {len(X_test)} samples")
    print(f"Features: {features.shape[1]} | Classes: {len(np.unique(labels))}")

    widths = compute_column_widths(len("sklearn-adaboost"))
    print_header(widths)

    results: list[dict[str, Any]] = []
    overall_start = time.time()

    for depth in max_depths:
        tree = train_tree(X_train, y_train, X_test, y_test, max_depth=depth)
        results.append(
            {
                "model": "bdt-tree",
                "depth": depth,
                "size": tree.n_leaves,
                "train_acc": tree.train_accuracy,
                "test_acc": tree.test_accuracy,
                "time": tree.elapsed,
            }
        )
        print_row(results[-1], widths)

        baseline = train_sklearn_dt(
            X_train, y_train, X_test, y_test, max_depth=depth, random_state=random_state
        )
        results.append(
            {
                "model": "sklearn-tree",
                "depth": depth,
                "size": int(baseline.classifier.get_n_leaves()),
                "train_acc": baseline.train_accuracy,
                "test_acc": baseline.test_accuracy,
                "time": baseline.elapsed,
            }
        )
        print_row(results[-1], widths)

    boosted = train_adaboost(
        X_train,
        y_train,
        X_test,
        y_test,
        iterations=iterations,
        max_depth=boost_depth,
        max_alpha=max_alpha,
        random_state=random_state,
        verbose=verbose,
    )
    results.append(
        {
            "model": "bdt-adaboost",
            "depth": boost_depth,
            "size": boosted.n_learners,
            "train_acc": boosted.train_accuracy,
            "test_acc": boosted.test_accuracy,
            "time": boosted.elapsed,
        }
    )
    print_row(results[-1], widths)

    baseline_boost = train_sklearn_adaboost(
        X_train,
        y_train,
        X_test,
        y_test,
        n_estimators=iterations,
        max_depth=boost_depth,
        random_state=random_state,
    )
    results.append(
        {
            "model": "sklearn-adaboost",
            "depth": boost_depth,
            "size": len(baseline_boost.classifier.estimators_),
            "train_acc": baseline_boost.train_accuracy,
            "test_acc": baseline_boost.test_accuracy,
            "time": baseline_boost.elapsed,
        }
    )
    print_row(results[-1], widths)

    print(f"Total time: {time.time() - overall_start:.1f}s")

    return pd.DataFrame(results)
