import collections.abc
import enum
import math
from typing import Any

import numpy

from bdt.exceptions import (
    EmptyInputError,
    InvalidConfigurationError,
    InvalidInputError,
    LengthMismatchError,
)
from bdt.impurity import majority_label
from bdt.split import best_split, information_gain
from bdt.tree import (
    DecisionNode,
    LeafNode,
    TreeNode,
    as_label_vector,
    predict_node,
    predict_rows,
)
from bdt.types import FeatureMatrix, FeatureVector, LabelVector


class Criterion(enum.Enum):
    """Split quality measure used when growing a tree."""

    GINI = "gini"
    """Minimize weighted Gini impurity"""
    INFORMATION_GAIN = "information_gain"
    """Maximize entropy reduction"""


def as_criterion(criterion: "Criterion | str") -> Criterion:
    """
    Resolve a criterion given as enum member or string value.

    Raises:
        InvalidConfigurationError: if the criterion is unknown
    """
    if isinstance(criterion, Criterion):
        return criterion
    try:
        return Criterion(criterion)
    except ValueError:
        raise InvalidConfigurationError(
            f"Unknown criterion: {criterion!r}. "
            f"Expected one of {[c.value for c in Criterion]}."
        ) from None


def as_training_set(
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
    labels: collections.abc.Sequence[Any] | LabelVector,
    *,
    allow_empty: bool = True,
) -> tuple[FeatureMatrix, LabelVector]:
    """
    Convert features and labels to arrays and check that they describe the same samples.

    Raises:
        InvalidInputError: if features is not a matrix or labels not a vector
        LengthMismatchError: if the number of rows and labels differ
        EmptyInputError: if there are no samples and allow_empty is False
    """
    labels = as_label_vector(labels)
    features = numpy.asarray(features, dtype=numpy.float64)
    if features.ndim == 1 and features.shape[0] == 0:
        features = features.reshape(0, 0)
    if features.ndim != 2:
        raise InvalidInputError("Features must be a 2-dimensional matrix.")
    if labels.ndim != 1:
        raise InvalidInputError("Labels must be a 1-dimensional vector.")
    if features.shape[0] != labels.shape[0]:
        raise LengthMismatchError(
            "Inconsistent number of samples between features and labels."
        )
    if not allow_empty and labels.shape[0] == 0:
        raise EmptyInputError("Training set has no samples.")
    return features, labels


def _best_gini_split(
    features: FeatureMatrix, labels: LabelVector
) -> tuple[int | None, float]:
    best_feature: int | None = None
    best_threshold = 0.0
    best_score = math.inf

    for j in range(features.shape[1]):
        threshold, gini = best_split(features[:, j], labels)
        if threshold is not None and gini < best_score:
            best_score = gini
            best_threshold = threshold
            best_feature = j

    return best_feature, best_threshold


def _best_information_gain_split(
    features: FeatureMatrix, labels: LabelVector
) -> tuple[int | None, float]:
    best_feature: int | None = None
    best_threshold = 0.0
    best_score = -math.inf

    for j in range(features.shape[1]):
        threshold, gain = information_gain(features[:, j], labels)
        if gain > best_score:
            best_score = gain
            best_threshold = threshold
            best_feature = j

    # No split reduces entropy.
    if best_score <= 0:
        return None, best_threshold
    return best_feature, best_threshold


def _build(
    features: FeatureMatrix,
    labels: LabelVector,
    max_depth: int,
    criterion: Criterion,
) -> TreeNode:
    n_samples = labels.shape[0]
    if n_samples == 0 or max_depth <= 0 or len(set(labels.tolist())) == 1:
        return LeafNode(majority_label(labels))

    if criterion is Criterion.GINI:
        feature, threshold = _best_gini_split(features, labels)
    else:
        feature, threshold = _best_information_gain_split(features, labels)

    if feature is None:
        return LeafNode(majority_label(labels))

    goes_left = features[:, feature] <= threshold
    left = _build(features[goes_left], labels[goes_left], max_depth - 1, criterion)
    right = _build(features[~goes_left], labels[~goes_left], max_depth - 1, criterion)

    return DecisionNode(feature=feature, threshold=threshold, left=left, right=right)


def train_tree(
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
    labels: collections.abc.Sequence[Any] | LabelVector,
    max_depth: int = 5,
    criterion: Criterion | str = Criterion.GINI,
) -> TreeNode:
    """
    Grow a binary decision tree with numeric threshold splits.

    A node becomes a leaf holding the majority label when it has no samples,
    a single class, no depth left, or no split improving the criterion.
    Otherwise the best (feature, threshold) over all features is chosen,
    the samples are partitioned and both sides are grown with max_depth - 1.

    Args:
        features: training features, one row per sample
        labels: training labels
        max_depth: maximum number of decisions on any root-to-leaf path
        criterion: "gini" (minimize weighted impurity) or
            "information_gain" (maximize entropy reduction)

    Returns:
        The root node, a LeafNode or a DecisionNode

    Raises:
        InvalidConfigurationError: if the criterion is unknown
        InvalidInputError: if features and labels do not describe the same samples
    """
    criterion = as_criterion(criterion)
    features, labels = as_training_set(features, labels)
    return _build(features, labels, max_depth, criterion)


def predict_tree(
    node: TreeNode,
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
) -> LabelVector:
    """Predict a label for every row of `features`."""
    features = numpy.asarray(features, dtype=numpy.float64)
    if features.ndim != 2:
        raise InvalidInputError("Features must be a 2-dimensional matrix.")
    return predict_rows(node, features)


def predict_tree_single(
    node: TreeNode, row: collections.abc.Sequence[float] | FeatureVector
) -> Any:
    return predict_node(node, numpy.asarray(row, dtype=numpy.float64))
