import collections.abc
from typing import Any

import numpy

from bdt.adaboost import AdaBoost, train_adaboost
from bdt.builder import Criterion, as_training_set, predict_tree, train_tree
from bdt.exceptions import InvalidTestSetError
from bdt.tree import TreeNode, as_label_vector, count_leaves, predict_node, tree_depth
from bdt.types import FeatureMatrix, FeatureVector, LabelVector


def _check_test_features(features: Any, n_features: int) -> FeatureMatrix:
    features = numpy.asarray(features, dtype=numpy.float64)
    if features.ndim != 2:
        raise InvalidTestSetError("Test set must be a 2-dimensional matrix.")
    if features.shape[1] != n_features:
        raise InvalidTestSetError(
            "Number of features in test set does not match training set."
        )
    return features


def _check_test_sample(row: Any, n_features: int) -> FeatureVector:
    row = numpy.asarray(row, dtype=numpy.float64)
    if row.ndim != 1 or row.shape[0] != n_features:
        raise InvalidTestSetError(
            "Number of features in test sample does not match training set."
        )
    return row


def _accuracy(predictions: LabelVector, labels: Any) -> float:
    labels = as_label_vector(labels).tolist()
    predictions = predictions.tolist()
    if len(predictions) != len(labels):
        raise InvalidTestSetError(
            "Inconsistent number of samples between features and labels."
        )
    if not labels:
        return 0.0
    return sum(p == t for p, t in zip(predictions, labels)) / len(labels)


class DecisionTreeClassifier:
    _n_samples: int
    _n_features: int
    _root: TreeNode

    def __init__(
        self,
        features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
        labels: collections.abc.Sequence[Any] | LabelVector,
        max_depth: int = 5,
        *,
        criterion: Criterion | str = Criterion.GINI,
    ) -> None:
        """
        Initialize and train a decision tree classifier.

        Args:
            features: training features, one row per sample
            labels: training labels
            max_depth: maximum tree depth (default: 5)
            criterion: "gini" or "information_gain" (default: "gini")

        Raises:
            InvalidInputError: if features/labels mismatch
            InvalidConfigurationError: if the criterion is unknown
        """
        features, labels = as_training_set(features, labels)
        self._n_samples = features.shape[0]
        self._n_features = features.shape[1]
        self._root = train_tree(features, labels, max_depth=max_depth, criterion=criterion)

    @property
    def root(self) -> TreeNode:
        return self._root

    @property
    def depth(self) -> int:
        return tree_depth(self._root)

    @property
    def n_leaves(self) -> int:
        return count_leaves(self._root)

    def predict(self, features: FeatureMatrix) -> LabelVector:
        features = _check_test_features(features, self._n_features)
        return predict_tree(self._root, features)

    def predict_single(self, features: FeatureVector) -> Any:
        return predict_node(self._root, _check_test_sample(features, self._n_features))

    def score(self, features: FeatureMatrix, labels: LabelVector) -> float:
        """Fraction of samples whose label is predicted correctly."""
        return _accuracy(self.predict(features), labels)


class AdaBoostClassifier:
    _n_features: int
    _model: AdaBoost

    def __init__(
        self,
        features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
        labels: collections.abc.Sequence[Any] | LabelVector,
        *,
        iterations: int = 50,
        max_alpha: float = 2.5,
        max_depth: int = 1,
        criterion: Criterion | str = Criterion.GINI,
        rng: numpy.random.Generator | int | None = None,
        verbose: bool = False,
    ) -> None:
        """
        Initialize and train an AdaBoost classifier.

        Args:
            features: training features, one row per sample
            labels: training labels
            iterations: maximum number of trees (default: 50)
            max_alpha: cap on each tree's vote weight (default: 2.5)
            max_depth: depth of each tree (default: 1, decision stumps)
            criterion: split criterion of the trees (default: "gini")
            rng: random generator or seed for resampling
            verbose: if True, print progress information

        Raises:
            InvalidInputError: if features/labels mismatch or are empty
            InvalidConfigurationError: if iterations < 1 or the criterion is unknown
        """
        features, labels = as_training_set(features, labels)
        self._n_features = features.shape[1]
        self._model = train_adaboost(
            features,
            labels,
            iterations=iterations,
            max_alpha=max_alpha,
            max_depth=max_depth,
            criterion=criterion,
            rng=rng,
            verbose=verbose,
        )

    @property
    def model(self) -> AdaBoost:
        """Return the trained ensemble."""
        return self._model

    def predict(self, features: FeatureMatrix) -> LabelVector:
        features = _check_test_features(features, self._n_features)
        return self._model.predict(features)

    def predict_single(self, features: FeatureVector) -> Any:
        return self._model.predict_single(_check_test_sample(features, self._n_features))

    def score(self, features: FeatureMatrix, labels: LabelVector) -> float:
        """Fraction of samples whose label is predicted correctly."""
        return _accuracy(self.predict(features), labels)
