from collections.abc import Hashable
from typing import Any, TypeVar

import numpy

FeatureVector = numpy.ndarray[tuple[int], numpy.dtype[numpy.float64]]
"""0-indexed feature vector for a single sample"""

FeatureMatrix = numpy.ndarray[tuple[int, int], numpy.dtype[numpy.float64]]
"""0-indexed feature matrix for multiple samples, one row per sample"""

LabelVector = numpy.ndarray[tuple[int], numpy.dtype[Any]]
"""0-indexed label vector for multiple samples"""

WeightVector = numpy.ndarray[tuple[int], numpy.dtype[numpy.float64]]
"""Per-sample weights, normalized to sum to 1"""

Label = TypeVar("Label", bound=Hashable)
"""Class label, any hashable and equality-comparable value"""
