import numpy as np
import pytest

from bdt import AdaBoostClassifier, DecisionTreeClassifier
from bdt.exceptions import (
    InvalidConfigurationError,
    InvalidTestSetError,
    LengthMismatchError,
)
from bdt.tree import DecisionNode


class TestDecisionTreeClassifier:
    """Integration tests for DecisionTreeClassifier."""

    def test_100_percent_accuracy(self, separable_dataset):
        features, labels = separable_dataset

        clf = DecisionTreeClassifier(features, labels)
        predictions = clf.predict(features)

        assert np.array_equal(predictions, labels)
        assert clf.score(features, labels) == 1.0

    def test_prediction_shape(self, iris_sample):
        features, labels = iris_sample

        clf = DecisionTreeClassifier(features, labels, max_depth=3)
        assert clf.predict(features).shape == (10,)

    def test_single_prediction(self, separable_dataset):
        features, labels = separable_dataset

        clf = DecisionTreeClassifier(features, labels)
        for i in range(len(features)):
            assert clf.predict_single(features[i]) == labels[i]

    def test_structure(self, xor_dataset):
        features, labels = xor_dataset

        clf = DecisionTreeClassifier(features, labels, max_depth=2)
        assert isinstance(clf.root, DecisionNode)
        assert clf.depth == 2
        assert clf.n_leaves == 4

    def test_information_gain(self, separable_dataset):
        features, labels = separable_dataset

        clf = DecisionTreeClassifier(features, labels, criterion="information_gain")
        assert clf.score(features, labels) == 1.0

    def test_wrong_number_of_features(self, separable_dataset):
        features, labels = separable_dataset

        clf = DecisionTreeClassifier(features, labels)
        with pytest.raises(InvalidTestSetError):
            clf.predict(np.ones((2, 3)))
        with pytest.raises(InvalidTestSetError):
            clf.predict_single(np.ones(3))

    def test_score_length_mismatch(self, separable_dataset):
        features, labels = separable_dataset

        clf = DecisionTreeClassifier(features, labels)
        with pytest.raises(InvalidTestSetError):
            clf.score(features, labels[:3])

    def test_tuple_labels(self):
        features = [[1.0], [2.0], [10.0], [11.0]]
        labels = [("a", 1), ("a", 1), ("b", 2), ("b", 2)]

        clf = DecisionTreeClassifier(features, labels)
        assert clf.predict_single([1.5]) == ("a", 1)
        assert clf.score(features, labels) == 1.0

    def test_inconsistent_training_set(self):
        with pytest.raises(LengthMismatchError):
            DecisionTreeClassifier([[1.0], [2.0]], [0, 1, 0])

    def test_unknown_criterion(self, separable_dataset):
        features, labels = separable_dataset
        with pytest.raises(InvalidConfigurationError):
            DecisionTreeClassifier(features, labels, criterion="mse")


class TestAdaBoostClassifier:
    """Integration tests for AdaBoostClassifier."""

    def test_separable(self, separable_dataset):
        features, labels = separable_dataset

        clf = AdaBoostClassifier(features, labels, rng=0)
        assert len(clf.model.learners) == 1
        assert np.array_equal(clf.predict(features), labels)
        assert clf.score(features, labels) == 1.0

    def test_single_prediction(self, string_label_dataset):
        features, labels = string_label_dataset

        clf = AdaBoostClassifier(features, labels, iterations=5, rng=0)
        assert clf.predict_single([1.5, 2.5]) == "a"
        assert clf.predict_single([11.5, 21.5]) == "b"

    def test_accuracy_in_range(self, iris_sample):
        features, labels = iris_sample

        clf = AdaBoostClassifier(features, labels, iterations=20, rng=4)
        assert 0.0 <= clf.score(features, labels) <= 1.0

    def test_wrong_number_of_features(self, separable_dataset):
        features, labels = separable_dataset

        clf = AdaBoostClassifier(features, labels, rng=0)
        with pytest.raises(InvalidTestSetError):
            clf.predict(np.ones((1, 5)))
        with pytest.raises(InvalidTestSetError):
            clf.predict_single([1.0])

    def test_zero_iterations(self, separable_dataset):
        features, labels = separable_dataset
        with pytest.raises(InvalidConfigurationError):
            AdaBoostClassifier(features, labels, iterations=0)
