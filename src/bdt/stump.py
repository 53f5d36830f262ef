import collections.abc
import dataclasses
import math
from typing import Any, Generic

import numpy

from bdt.builder import as_training_set
from bdt.exceptions import InvalidInputError
from bdt.impurity import majority_label
from bdt.split import best_split
from bdt.tree import DecisionNode, LeafNode, as_label_array
from bdt.types import FeatureMatrix, FeatureVector, Label, LabelVector


@dataclasses.dataclass(frozen=True)
class DecisionStump(Generic[Label]):
    """
    Single-decision classifier on one feature threshold.

    A stump with threshold -inf sends every sample right and acts as a
    constant classifier; training produces one with equal branch labels
    when no feature can be split.
    """

    feature: int
    """Feature index (0-indexed)"""

    threshold: float

    left_label: Label
    """Label for samples where `row[feature] <= threshold`"""

    right_label: Label
    """Label for samples where `row[feature] > threshold`"""

    def predict_single(self, row: collections.abc.Sequence[float] | FeatureVector) -> Label:
        if row[self.feature] <= self.threshold:
            return self.left_label
        return self.right_label

    def predict(
        self,
        features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
    ) -> LabelVector:
        features = numpy.asarray(features, dtype=numpy.float64)
        if features.ndim != 2:
            raise InvalidInputError("Features must be a 2-dimensional matrix.")
        goes_left = features[:, self.feature] <= self.threshold
        predictions = numpy.empty(features.shape[0], dtype=object)
        for i in range(features.shape[0]):
            predictions[i] = self.left_label if goes_left[i] else self.right_label
        return as_label_array(predictions)

    def to_tree(self) -> DecisionNode[Label]:
        """The equivalent depth-1 decision tree."""
        return DecisionNode(
            feature=self.feature,
            threshold=self.threshold,
            left=LeafNode(self.left_label),
            right=LeafNode(self.right_label),
        )


def train_stump(
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
    labels: collections.abc.Sequence[Any] | LabelVector,
) -> DecisionStump:
    """
    Train a decision stump minimizing weighted Gini impurity.

    Every feature is searched with `best_split`; the first feature reaching
    the lowest impurity wins. Each branch predicts the majority label of the
    training samples routed to it.

    Args:
        features: training features, one row per sample
        labels: training labels

    Returns:
        The trained DecisionStump. If no feature can be split, a constant
        stump (feature 0, threshold -inf) predicting the majority label.

    Raises:
        EmptyInputError: if there are no samples
        InvalidInputError: if features and labels do not describe the same samples
    """
    features, labels = as_training_set(features, labels, allow_empty=False)

    best_feature: int | None = None
    best_threshold = 0.0
    best_gini = math.inf

    for j in range(features.shape[1]):
        threshold, gini = best_split(features[:, j], labels)
        if threshold is None:
            continue
        if gini < best_gini:
            best_gini = gini
            best_threshold = threshold
            best_feature = j

    if best_feature is None:
        label = majority_label(labels)
        return DecisionStump(0, -math.inf, label, label)

    goes_left = features[:, best_feature] <= best_threshold
    return DecisionStump(
        best_feature,
        best_threshold,
        majority_label(labels[goes_left]),
        majority_label(labels[~goes_left]),
    )


def predict_stump(
    stump: DecisionStump,
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
) -> LabelVector:
    return stump.predict(features)
