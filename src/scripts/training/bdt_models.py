"""Training utilities for bdt decision trees and AdaBoost."""

from __future__ import annotations

import dataclasses
import time

import numpy as np

from bdt import AdaBoostClassifier, DecisionTreeClassifier


@dataclasses.dataclass(frozen=True)
class TreeResult:
    """Result from training a bdt DecisionTreeClassifier."""

    classifier: DecisionTreeClassifier
    train_accuracy: float
    test_accuracy: float | None
    elapsed: float
    n_leaves: int
    depth: int


@dataclasses.dataclass(frozen=True)
class AdaBoostResult:
    """Result from training a bdt AdaBoostClassifier."""

    classifier: AdaBoostClassifier
    train_accuracy: float
    test_accuracy: float | None
    elapsed: float
    n_learners: int


def train_tree(
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None = None,
    y_test: np.ndarray | None = None,
    *,
    max_depth: int = 5,
    criterion: str = "gini",
) -> TreeResult:
    """
    Train a bdt decision tree with timing and accuracy metrics.

    Args:
        X_train: Training features
        y_train: Training labels
        X_test: Optional test features for evaluation
        y_test: Optional test labels for evaluation
        max_depth: Maximum tree depth
        criterion: Splitting criterion ("gini" or "information_gain")

    Returns:
        TreeResult with classifier, accuracies, timing and tree stats
    """
    start = time.time()
    clf = DecisionTreeClassifier(X_train, y_train, max_depth, criterion=criterion)
    elapsed = time.time() - start

    test_acc: float | None = None
    if X_test is not None and y_test is not None:
        test_acc = clf.score(X_test, y_test)

    return TreeResult(
        classifier=clf,
        train_accuracy=clf.score(X_train, y_train),
        test_accuracy=test_acc,
        elapsed=elapsed,
        n_leaves=clf.n_leaves,
        depth=clf.depth,
    )


def train_adaboost(
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None = None,
    y_test: np.ndarray | None = None,
    *,
    iterations: int = 50,
    max_depth: int = 1,
    max_alpha: float = 2.5,
    random_state: int | None = None,
    verbose: bool = False,
) -> AdaBoostResult:
    """
    Train a bdt AdaBoost ensemble with timing and accuracy metrics.

    Args:
        X_train: Training features
        y_train: Training labels
        X_test: Optional test features for evaluation
        y_test: Optional test labels for evaluation
        iterations: Maximum number of trees
        max_depth: Depth of each tree
        max_alpha: Cap on each tree's vote weight
        random_state: Random seed for resampling
        verbose: Print progress information

    Returns:
        AdaBoostResult with classifier, accuracies and timing
    """
    start = time.time()
    clf = AdaBoostClassifier(
        X_train,
        y_train,
        iterations=iterations,
        max_depth=max_depth,
        max_alpha=max_alpha,
        rng=random_state,
        verbose=verbose,
    )
    elapsed = time.time() - start

    test_acc: float | None = None
    if X_test is not None and y_test is not None:
        test_acc = clf.score(X_test, y_test)

    return AdaBoostResult(
        classifier=clf,
        train_accuracy=clf.score(X_train, y_train),
        test_accuracy=test_acc,
        elapsed=elapsed,
        n_learners=len(clf.model.learners),
    )
