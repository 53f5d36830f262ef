import collections.abc
import math
from typing import Any

import numpy

from bdt.exceptions import EmptyInputError, InvalidInputError, LengthMismatchError
from bdt.impurity import entropy
from bdt.tree import as_label_vector
from bdt.types import FeatureMatrix, FeatureVector, LabelVector


def _as_column(
    feature_values: collections.abc.Sequence[float] | FeatureVector,
    labels: collections.abc.Sequence[Any] | LabelVector,
) -> tuple[FeatureVector, LabelVector]:
    feature_values = numpy.asarray(feature_values, dtype=numpy.float64)
    labels = as_label_vector(labels)
    if feature_values.ndim != 1 or labels.ndim != 1:
        raise InvalidInputError("Feature values and labels must be 1-dimensional.")
    if feature_values.shape[0] != labels.shape[0]:
        raise LengthMismatchError(
            f"Feature values ({feature_values.shape[0]}) and labels "
            f"({labels.shape[0]}) must have the same length."
        )
    return feature_values, labels


def _sorted_prefix_counts(
    feature_values: FeatureVector, labels: LabelVector
) -> tuple[FeatureVector, numpy.ndarray]:
    """
    Sort a column and count classes cumulatively along the sorted order.

    Returns:
        Tuple of (sorted feature values, prefix counts) where prefix counts has
        shape (n, n_classes) and row i holds the class counts of the first i+1
        sorted samples.
    """
    # Permute indices so every value keeps its label.
    order = numpy.argsort(feature_values, kind="stable")
    f_sorted = feature_values[order]

    class_ids: dict[Any, int] = {}
    codes = numpy.array(
        [class_ids.setdefault(label, len(class_ids)) for label in labels[order].tolist()],
        dtype=numpy.intp,
    )
    one_hot = numpy.zeros((codes.shape[0], len(class_ids)), dtype=numpy.float64)
    one_hot[numpy.arange(codes.shape[0]), codes] = 1.0
    return f_sorted, numpy.cumsum(one_hot, axis=0)


def _candidate_thresholds(f_sorted: FeatureVector) -> FeatureVector:
    """Midpoints between consecutive distinct values of a sorted column, ascending."""
    distinct = numpy.unique(f_sorted)
    # Halve first so values near the float64 maximum do not overflow.
    return distinct[:-1] / 2 + distinct[1:] / 2


def _gini_rows(counts: numpy.ndarray, sizes: numpy.ndarray) -> numpy.ndarray:
    with numpy.errstate(divide="ignore", invalid="ignore"):
        p = counts / sizes[:, None]
        gini = 1.0 - numpy.sum(p**2, axis=1)
    return numpy.where(sizes > 0, gini, 0.0)


def _entropy_rows(counts: numpy.ndarray, sizes: numpy.ndarray) -> numpy.ndarray:
    with numpy.errstate(divide="ignore", invalid="ignore"):
        p = counts / sizes[:, None]
        terms = numpy.where(p > 0, p * numpy.log2(p), 0.0)
    return numpy.where(sizes > 0, -numpy.sum(terms, axis=1), 0.0)


def _partition_counts(
    f_sorted: FeatureVector, prefix: numpy.ndarray, thresholds: FeatureVector
) -> tuple[numpy.ndarray, numpy.ndarray, numpy.ndarray, numpy.ndarray]:
    n = f_sorted.shape[0]
    # Number of samples with value <= t, for every candidate t.
    n_left = numpy.searchsorted(f_sorted, thresholds, side="right")
    left_counts = numpy.zeros((thresholds.shape[0], prefix.shape[1]))
    has_left = n_left > 0
    left_counts[has_left] = prefix[n_left[has_left] - 1]
    right_counts = prefix[-1] - left_counts
    return (
        left_counts,
        n_left.astype(numpy.float64),
        right_counts,
        (n - n_left).astype(numpy.float64),
    )


def best_split(
    feature_values: collections.abc.Sequence[float] | FeatureVector,
    labels: collections.abc.Sequence[Any] | LabelVector,
) -> tuple[float | None, float]:
    """
    Find the threshold on one numeric feature minimizing weighted Gini impurity.

    Samples with value <= threshold go left, the rest go right. Candidate
    thresholds are the midpoints between consecutive distinct values and are
    scanned in ascending order; the lowest threshold wins ties, so a perfect
    split (impurity 0) is the first one found.

    Args:
        feature_values: values of a single feature, one per sample
        labels: class labels, same length as feature_values

    Returns:
        Tuple of (threshold, weighted impurity). The threshold is None and the
        impurity is infinite when no split exists (single sample, or every
        value identical).

    Raises:
        EmptyInputError: if feature_values is empty
        LengthMismatchError: if feature_values and labels differ in length
    """
    if len(feature_values) == 0:
        raise EmptyInputError("best_split received an empty feature array.")
    feature_values, labels = _as_column(feature_values, labels)

    n = feature_values.shape[0]
    if n == 1:
        return None, math.inf

    f_sorted, prefix = _sorted_prefix_counts(feature_values, labels)
    thresholds = _candidate_thresholds(f_sorted)
    if thresholds.shape[0] == 0:
        return None, math.inf

    left_counts, n_left, right_counts, n_right = _partition_counts(
        f_sorted, prefix, thresholds
    )
    weighted = (n_left / n) * _gini_rows(left_counts, n_left) + (
        n_right / n
    ) * _gini_rows(right_counts, n_right)

    # argmin keeps the first minimum, i.e. the lowest threshold.
    best = int(numpy.argmin(weighted))
    return float(thresholds[best]), float(weighted[best])


def information_gain(
    feature_values: collections.abc.Sequence[float] | FeatureVector,
    labels: collections.abc.Sequence[Any] | LabelVector,
) -> tuple[float, float]:
    """
    Find the threshold on one numeric feature maximizing information gain.

    Gain is the parent entropy minus the size-weighted entropy of the two
    partitions (value <= threshold, value > threshold). Thresholds producing
    an empty partition are skipped; the lowest threshold wins ties.

    Returns:
        Tuple of (threshold, gain), or (0.0, 0.0) for empty input or a
        column with fewer than two distinct values.

    Raises:
        LengthMismatchError: if feature_values and labels differ in length
    """
    feature_values, labels = _as_column(feature_values, labels)
    n = feature_values.shape[0]
    if n == 0:
        return 0.0, 0.0

    f_sorted, prefix = _sorted_prefix_counts(feature_values, labels)
    thresholds = _candidate_thresholds(f_sorted)
    if thresholds.shape[0] == 0:
        return 0.0, 0.0

    left_counts, n_left, right_counts, n_right = _partition_counts(
        f_sorted, prefix, thresholds
    )
    non_empty = (n_left > 0) & (n_right > 0)
    if not numpy.any(non_empty):
        return 0.0, 0.0

    parent = _entropy_rows(prefix[-1:], numpy.array([float(n)]))[0]
    children = (n_left / n) * _entropy_rows(left_counts, n_left) + (
        n_right / n
    ) * _entropy_rows(right_counts, n_right)
    gains = numpy.where(non_empty, parent - children, -numpy.inf)

    best = int(numpy.argmax(gains))
    return float(thresholds[best]), float(gains[best])


def categorical_information_gain(
    column: collections.abc.Sequence[Any] | numpy.ndarray,
    labels: collections.abc.Sequence[Any] | LabelVector,
) -> float:
    """
    Information gain of a multi-way split on every distinct value of a discrete column.
    """
    column = numpy.asarray(column)
    labels = as_label_vector(labels)
    if column.shape[0] != labels.shape[0]:
        raise LengthMismatchError(
            f"Column ({column.shape[0]}) and labels ({labels.shape[0]}) "
            "must have the same length."
        )
    n = labels.shape[0]
    if n == 0:
        return 0.0

    groups: dict[Any, list[Any]] = {}
    for value, label in zip(column.tolist(), labels.tolist()):
        groups.setdefault(value, []).append(label)

    weighted_entropy = sum(len(subset) / n * entropy(subset) for subset in groups.values())
    return entropy(labels) - weighted_entropy


def best_categorical_split(
    features: collections.abc.Sequence[collections.abc.Sequence[Any]] | FeatureMatrix,
    labels: collections.abc.Sequence[Any] | LabelVector,
) -> tuple[int | None, float]:
    """
    Select the discrete feature whose exact-value split has the highest information gain.

    Returns:
        Tuple of (0-indexed feature, gain); (None, -inf) if there are no features.
    """
    features = numpy.asarray(features)
    if features.ndim != 2:
        raise InvalidInputError("Features must be a 2-dimensional matrix.")

    best_feature: int | None = None
    best_gain = -math.inf
    for j in range(features.shape[1]):
        gain = categorical_information_gain(features[:, j], labels)
        if gain > best_gain:
            best_gain = gain
            best_feature = j
    return best_feature, best_gain
