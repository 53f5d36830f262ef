import numpy as np
import pytest

from bdt.builder import Criterion, as_criterion, predict_tree, predict_tree_single, train_tree
from bdt.exceptions import InvalidConfigurationError, InvalidInputError, LengthMismatchError
from bdt.tree import DecisionNode, LeafNode, count_leaves, tree_depth


class TestTrainTree:
    """Tests for recursive tree construction."""

    def test_basic_structure(self, separable_dataset):
        features, labels = separable_dataset
        tree = train_tree(features, labels, max_depth=2)

        assert isinstance(tree, DecisionNode)
        assert tree.feature == 0
        assert tree.threshold == 6.5
        assert tree.left == LeafNode(0)
        assert tree.right == LeafNode(1)

    def test_predict_on_training_data(self, separable_dataset):
        features, labels = separable_dataset
        tree = train_tree(features, labels, max_depth=5)
        predictions = predict_tree(tree, features)

        assert np.array_equal(predictions, labels)
        assert len(predictions) == len(labels)

    def test_predict_single_sample(self, separable_dataset):
        features, labels = separable_dataset
        tree = train_tree(features, labels, max_depth=5)

        assert predict_tree_single(tree, [1.0, 2.0]) == 0
        assert predict_tree_single(tree, [10.0, 20.0]) == 1

    def test_predict_matrix_with_single_sample(self, separable_dataset):
        features, labels = separable_dataset
        tree = train_tree(features, labels, max_depth=5)
        predictions = predict_tree(tree, [[1.0, 2.0]])

        assert predictions.shape == (1,)
        assert predictions[0] == 0

    def test_predict_requires_matrix(self, separable_dataset):
        features, labels = separable_dataset
        tree = train_tree(features, labels)
        with pytest.raises(InvalidInputError):
            predict_tree(tree, [1.0, 2.0])

    def test_single_sample_is_leaf(self):
        tree = train_tree([[5.0, 5.0]], [1], max_depth=5)
        assert tree == LeafNode(1)
        assert np.array_equal(predict_tree(tree, [[5.0, 5.0]]), [1])

    def test_single_class_is_leaf(self):
        tree = train_tree([[1, 2], [2, 3], [3, 4]], [0, 0, 0], max_depth=5)
        assert tree == LeafNode(0)

    def test_no_samples_is_leaf(self):
        tree = train_tree([], [])
        assert isinstance(tree, LeafNode)
        assert tree.label is None

    def test_constant_features_are_leaf(self):
        tree = train_tree([[1.0], [1.0], [1.0]], ["a", "b", "b"])
        assert tree == LeafNode("b")

    def test_max_depth_one(self):
        features = [[1, 2], [2, 3], [3, 4], [4, 5], [10, 20], [11, 21], [12, 22], [13, 23]]
        labels = [0, 0, 0, 0, 1, 1, 1, 1]
        tree = train_tree(features, labels, max_depth=1)

        assert isinstance(tree, DecisionNode)
        assert isinstance(tree.left, LeafNode)
        assert isinstance(tree.right, LeafNode)

    def test_max_depth_zero_returns_majority_leaf(self):
        tree = train_tree([[1, 2], [2, 3], [3, 4], [10, 20]], [0, 0, 0, 1], max_depth=0)
        assert tree == LeafNode(0)

    def test_depth_never_exceeds_max_depth(self):
        rng = np.random.default_rng(1)
        features = rng.normal(size=(60, 3))
        labels = rng.integers(0, 3, size=60)
        for max_depth in range(0, 5):
            tree = train_tree(features, labels, max_depth=max_depth)
            assert tree_depth(tree) <= max_depth

    def test_string_labels(self, string_label_dataset):
        features, labels = string_label_dataset
        tree = train_tree(features, labels, max_depth=5)
        predictions = predict_tree(tree, features)

        assert np.array_equal(predictions, labels)
        assert set(predictions.tolist()) == {"a", "b"}

    def test_tuple_labels(self):
        features = [[1.0], [2.0], [10.0], [11.0]]
        labels = [("a", 1), ("a", 1), ("b", 2), ("b", 2)]
        tree = train_tree(features, labels)

        assert tree == DecisionNode(0, 6.0, LeafNode(("a", 1)), LeafNode(("b", 2)))
        predictions = predict_tree(tree, features)
        assert predictions.shape == (4,)
        assert predictions.tolist() == labels

    def test_mixed_labels_keep_their_types(self):
        features = [[1.0], [2.0], [10.0], [11.0]]
        tree = train_tree(features, [1, 1, "b", "b"])
        predictions = predict_tree(tree, features).tolist()

        assert predictions == [1, 1, "b", "b"]
        assert [type(p) for p in predictions] == [int, int, str, str]

    def test_mixed_object_array_labels(self):
        features = [[1.0], [2.0], [10.0], [11.0]]
        labels = np.array([1, 1, "b", "b"], dtype=object)
        tree = train_tree(features, labels)
        assert predict_tree(tree, features).tolist() == [1, 1, "b", "b"]

    def test_close_values(self):
        features = [[1.0, 1.0], [1.5, 1.5], [2.0, 2.0], [100.0, 100.0], [100.5, 100.5], [101.0, 101.0]]
        labels = [0, 0, 0, 1, 1, 1]
        tree = train_tree(features, labels, max_depth=5)
        assert np.array_equal(predict_tree(tree, features), labels)

    def test_xor_needs_two_levels(self, xor_dataset):
        features, labels = xor_dataset
        tree = train_tree(features, labels, max_depth=2)

        assert tree_depth(tree) == 2
        assert count_leaves(tree) == 4
        assert np.array_equal(predict_tree(tree, features), labels)

    def test_length_mismatch_raises(self):
        with pytest.raises(LengthMismatchError):
            train_tree([[1.0], [2.0]], [0])

    def test_features_must_be_matrix(self):
        with pytest.raises(InvalidInputError):
            train_tree([1.0, 2.0], [0, 1])


class TestCriterion:
    """Tests for criterion selection."""

    def test_string_and_enum_are_equivalent(self, iris_sample):
        features, labels = iris_sample
        assert train_tree(features, labels, criterion="gini") == train_tree(
            features, labels, criterion=Criterion.GINI
        )

    def test_unknown_criterion_raises(self, separable_dataset):
        features, labels = separable_dataset
        with pytest.raises(InvalidConfigurationError):
            train_tree(features, labels, criterion="chi_square")

    def test_unknown_criterion_raises_before_validation(self):
        with pytest.raises(InvalidConfigurationError):
            train_tree([[1.0], [2.0]], [0], criterion="entropy")

    def test_as_criterion(self):
        assert as_criterion("information_gain") is Criterion.INFORMATION_GAIN
        assert as_criterion(Criterion.GINI) is Criterion.GINI

    def test_information_gain_tree(self, separable_dataset):
        features, labels = separable_dataset
        tree = train_tree(features, labels, max_depth=5, criterion="information_gain")

        assert tree == DecisionNode(0, 6.5, LeafNode(0), LeafNode(1))
        assert np.array_equal(predict_tree(tree, features), labels)

    def test_information_gain_stops_without_gain(self, xor_dataset):
        """No single XOR split reduces entropy, so the root stays a leaf."""
        features, labels = xor_dataset
        tree = train_tree(features, labels, max_depth=5, criterion="information_gain")
        assert tree == LeafNode(0)

    def test_information_gain_fits_iris_sample(self, iris_sample):
        features, labels = iris_sample
        tree = train_tree(features, labels, max_depth=10, criterion=Criterion.INFORMATION_GAIN)
        assert np.array_equal(predict_tree(tree, features), labels)
