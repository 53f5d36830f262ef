from __future__ import annotations

import collections.abc
import dataclasses
from typing import Any, Generic

import numpy

from bdt.types import FeatureVector, Label


@dataclasses.dataclass(frozen=True)
class LeafNode(Generic[Label]):
    """Terminal node predicting a single label."""

    label: Label
    """Majority label of the training samples that reached this leaf"""


@dataclasses.dataclass(frozen=True)
class DecisionNode(Generic[Label]):
    """
    Internal node splitting on one feature.

    Samples with `row[feature] <= threshold` are routed to `left`, others to `right`.
    Both children are owned by this node only and are built before it.
    """

    feature: int
    """Feature index (0-indexed)"""

    threshold: float

    left: "TreeNode[Label]"
    right: "TreeNode[Label]"


TreeNode = LeafNode[Label] | DecisionNode[Label]


def predict_node(node: TreeNode[Label], row: FeatureVector) -> Label:
    """Route a single sample from `node` down to a leaf and return its label."""
    while True:
        match node:
            case LeafNode(label=label):
                return label
            case DecisionNode(feature=feature, threshold=threshold):
                if row[feature] <= threshold:
                    node = node.left
                else:
                    node = node.right
            case _:
                raise TypeError(f"Unexpected tree node: {node!r}")


def tree_depth(node: TreeNode[Label]) -> int:
    """Number of decision nodes on the longest root-to-leaf path. A lone leaf has depth 0."""
    match node:
        case LeafNode():
            return 0
        case DecisionNode(left=left, right=right):
            return 1 + max(tree_depth(left), tree_depth(right))
        case _:
            raise TypeError(f"Unexpected tree node: {node!r}")


def count_leaves(node: TreeNode[Label]) -> int:
    match node:
        case LeafNode():
            return 1
        case DecisionNode(left=left, right=right):
            return count_leaves(left) + count_leaves(right)
        case _:
            raise TypeError(f"Unexpected tree node: {node!r}")


def predict_rows(node: TreeNode[Label], features: numpy.ndarray) -> numpy.ndarray:
    """Predict every row of a feature matrix, returning labels aligned with the rows."""
    predictions = numpy.empty(features.shape[0], dtype=object)
    for i in range(features.shape[0]):
        predictions[i] = predict_node(node, features[i])
    return as_label_array(predictions)


def as_label_array(predictions: numpy.ndarray) -> numpy.ndarray:
    # Give homogeneous label arrays their natural dtype, e.g. int64 or <U5.
    if predictions.shape[0] == 0:
        return predictions
    values = predictions.tolist()
    try:
        tightened = numpy.array(values)
    except ValueError:
        # Ragged sequence labels, e.g. tuples of different lengths.
        return predictions
    # Sequence-valued labels would grow extra dimensions.
    if tightened.shape != predictions.shape:
        return predictions
    # Mixed labels must not be coerced, e.g. 1 into "1".
    narrowed = tightened.tolist()
    if narrowed != values or any(type(a) is not type(b) for a, b in zip(narrowed, values)):
        return predictions
    return tightened


def as_label_vector(labels: collections.abc.Iterable[Any]) -> numpy.ndarray:
    """
    Convert labels to a 1-dimensional array, one element per label.

    Arrays are used as given. Any other collection is stored element by
    element in an object array, so tuple labels stay single labels, and is
    then narrowed to a native dtype only when every label survives unchanged.
    """
    if isinstance(labels, numpy.ndarray):
        return labels
    if hasattr(labels, "tolist"):
        labels = labels.tolist()
    values = list(labels)
    vector = numpy.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        vector[i] = value
    return as_label_array(vector)
