import numpy as np
import pytest

from bdt.types import FeatureMatrix, LabelVector


@pytest.fixture
def separable_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """Two well separated groups, split perfectly by either feature"""
    features = np.array(
        [[1, 2], [2, 3], [3, 4], [10, 20], [11, 21], [12, 22]],
        dtype=np.float64,
    )
    labels = np.array([0, 0, 0, 1, 1, 1])
    return features, labels


@pytest.fixture
def string_label_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """Same layout as separable_dataset with string labels"""
    features = np.array(
        [[1, 2], [2, 3], [3, 4], [10, 20], [11, 21], [12, 22]],
        dtype=np.float64,
    )
    labels = np.array(["a", "a", "a", "b", "b", "b"])
    return features, labels


@pytest.fixture
def xor_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """XOR truth table: needs two levels of splits"""
    features = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float64)
    labels = np.array([0, 1, 1, 0])
    return features, labels


@pytest.fixture
def iris_sample() -> tuple[FeatureMatrix, LabelVector]:
    """Ten Iris rows, three classes, not separable by a single stump"""
    features = np.array(
        [
            [6.7, 2.5, 5.8, 1.8],
            [5.7, 2.8, 4.5, 1.3],
            [6.7, 3.0, 5.2, 2.3],
            [6.8, 2.8, 4.8, 1.4],
            [5.9, 3.2, 4.8, 1.8],
            [6.1, 2.6, 5.6, 1.4],
            [7.2, 3.6, 6.1, 2.5],
            [6.1, 3.0, 4.6, 1.4],
            [4.4, 3.0, 1.3, 0.2],
            [6.7, 3.3, 5.7, 2.1],
        ],
        dtype=np.float64,
    )
    labels = np.array([0, 1, 0, 1, 1, 0, 0, 1, 2, 0])
    return features, labels
