"""Training utilities for the sklearn baseline classifiers."""

from __future__ import annotations

import dataclasses
import time

import numpy as np
from sklearn.ensemble import AdaBoostClassifier
from sklearn.tree import DecisionTreeClassifier


@dataclasses.dataclass(frozen=True)
class SklearnResult:
    """Result from training an sklearn baseline classifier."""

    classifier: DecisionTreeClassifier | AdaBoostClassifier
    train_accuracy: float
    test_accuracy: float | None
    elapsed: float


def _evaluate(
    clf: DecisionTreeClassifier | AdaBoostClassifier,
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None,
    y_test: np.ndarray | None,
    elapsed: float,
) -> SklearnResult:
    train_acc = float(np.mean(clf.predict(X_train) == y_train))

    test_acc: float | None = None
    if X_test is not None and y_test is not None:
        test_acc = float(np.mean(clf.predict(X_test) == y_test))

    return SklearnResult(
        classifier=clf,
        train_accuracy=train_acc,
        test_accuracy=test_acc,
        elapsed=elapsed,
    )


def train_sklearn_dt(
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None = None,
    y_test: np.ndarray | None = None,
    *,
    max_depth: int | None = None,
    random_state: int | None = None,
    criterion: str = "gini",
) -> SklearnResult:
    """
    Train sklearn DecisionTreeClassifier.

    Args:
        X_train: Training features
        y_train: Training labels
        X_test: Optional test features for evaluation
        y_test: Optional test labels for evaluation
        max_depth: Maximum tree depth (None = unlimited)
        random_state: Random seed for reproducibility
        criterion: Splitting criterion ("gini" or "entropy")

    Returns:
        SklearnResult with classifier, accuracies and timing
    """
    start = time.time()
    clf = DecisionTreeClassifier(
        max_depth=max_depth,
        random_state=random_state,
        criterion=criterion,
    )
    clf.fit(X_train, y_train)
    return _evaluate(clf, X_train, y_train, X_test, y_test, time.time() - start)


def train_sklearn_adaboost(
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None = None,
    y_test: np.ndarray | None = None,
    *,
    n_estimators: int = 50,
    max_depth: int = 1,
    random_state: int | None = None,
) -> SklearnResult:
    """Train sklearn AdaBoostClassifier on depth-limited trees."""
    start = time.time()
    clf = AdaBoostClassifier(
        estimator=DecisionTreeClassifier(max_depth=max_depth),
        n_estimators=n_estimators,
        random_state=random_state,
    )
    clf.fit(X_train, y_train)
    return _evaluate(clf, X_train, y_train, X_test, y_test, time.time() - start)
