import collections
import collections.abc
import math
from typing import Any

import numpy


def _class_counts(labels: collections.abc.Iterable[Any]) -> collections.Counter:
    # Native Python values hash consistently across numpy scalar types.
    if isinstance(labels, numpy.ndarray):
        labels = labels.tolist()
    return collections.Counter(labels)


def gini_impurity(labels: collections.abc.Iterable[Any]) -> float:
    """
    Gini impurity of a collection of class labels.

    The probability that two labels drawn at random (with replacement) differ.
    0 for a pure (or empty) collection, at most 1 - 1/k for k classes.
    """
    counts = _class_counts(labels)
    n = sum(counts.values())
    if n == 0:
        return 0.0
    return 1.0 - sum((c / n) ** 2 for c in counts.values())


def entropy(labels: collections.abc.Iterable[Any]) -> float:
    """
    Shannon entropy (base 2) of a collection of class labels.

    Only observed classes contribute, so log2(0) never occurs.
    """
    counts = _class_counts(labels)
    n = sum(counts.values())
    h = 0.0
    for c in counts.values():
        p = c / n
        h -= p * math.log2(p)
    return h


def majority_label(labels: collections.abc.Iterable[Any]) -> Any:
    """
    Most frequent label, or None for an empty collection.

    Ties go to the label encountered first.
    """
    counts = _class_counts(labels)
    if not counts:
        return None
    # most_common sorts stably, so insertion order breaks ties.
    return counts.most_common(1)[0][0]
