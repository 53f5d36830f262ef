"""Training utilities for bdt and sklearn comparison."""

from scripts.training.bdt_models import (
    AdaBoostResult,
    TreeResult,
    train_adaboost,
    train_tree,
)
from scripts.training.sklearn_dt import (
    SklearnResult,
    train_sklearn_adaboost,
    train_sklearn_dt,
)

__all__ = [
    "AdaBoostResult",
    "TreeResult",
    "train_adaboost",
    "train_tree",
    "SklearnResult",
    "train_sklearn_adaboost",
    "train_sklearn_dt",
]
