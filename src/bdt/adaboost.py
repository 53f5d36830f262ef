import collections.abc
import dataclasses
import math
from typing import Any, Generic

import numpy

from bdt.builder import Criterion, as_criterion, as_training_set, train_tree
from bdt.exceptions import InvalidConfigurationError, InvalidInputError
from bdt.tree import TreeNode, as_label_array, predict_node, predict_rows
from bdt.types import FeatureMatrix, FeatureVector, Label, LabelVector, WeightVector


@dataclasses.dataclass(frozen=True)
class BoostingRound:
    """Training record of a single boosting iteration."""

    iteration: int  # 1-indexed
    error: float  # Fraction of misclassified samples in this round's training set
    alpha: float  # Uncapped vote weight, may be +/-inf
    vote: float  # Vote weight stored in the model, min(alpha, max_alpha)


@dataclasses.dataclass(frozen=True)
class AdaBoost(Generic[Label]):
    """
    Ensemble of decision trees combined by weighted vote.

    `learners` and `alphas` are aligned and kept in training order.
    """

    learners: tuple[TreeNode, ...]
    alphas: tuple[float, ...]
    labels: tuple[Label, ...]
    """Distinct training labels, in order of first appearance"""
    rounds: tuple[BoostingRound, ...] = ()

    def predict(
        self,
        features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
    ) -> LabelVector:
        return predict_adaboost(self, features)

    def predict_single(self, row: collections.abc.Sequence[float] | FeatureVector) -> Label:
        row = numpy.asarray(row, dtype=numpy.float64)
        scores = dict.fromkeys(self.labels, 0.0)
        for tree, alpha in zip(self.learners, self.alphas):
            scores[predict_node(tree, row)] += alpha
        # max returns the first maximal label in self.labels order.
        return max(self.labels, key=scores.__getitem__)


def compute_alpha(error: float) -> float:
    """
    Vote weight of a learner with the given error rate: 0.5 * ln((1 - error) / error).

    A perfect learner (error 0) gets +inf and a fully wrong one (error 1) gets -inf.
    """
    if error == 0:
        return math.inf
    if error == 1:
        return -math.inf
    return 0.5 * math.log((1 - error) / error)


def create_weighted_dataset(
    features: FeatureMatrix,
    labels: LabelVector,
    weights: WeightVector,
    rng: numpy.random.Generator,
) -> tuple[FeatureMatrix, LabelVector]:
    """
    Draw a new dataset of the same size, picking rows with probability given by `weights`.

    For every draw a uniform r in [0, 1) selects the first row whose
    cumulative weight is >= r, or the last row if rounding keeps the
    cumulative sum below r.

    Args:
        features: feature matrix, one row per sample
        labels: labels, one per sample
        weights: per-sample weights summing to 1
        rng: random source for the draws

    Returns:
        Tuple of (resampled features, resampled labels)
    """
    n_samples = labels.shape[0]
    cumulative_weights = numpy.cumsum(weights)
    draws = rng.random(n_samples)
    indices = numpy.searchsorted(cumulative_weights, draws, side="left")
    indices = numpy.minimum(indices, n_samples - 1)
    return features[indices], labels[indices]


def _update_weights(
    weights: WeightVector, misclassified: numpy.ndarray, alpha: float
) -> WeightVector:
    weights = weights * numpy.where(misclassified, math.exp(alpha), math.exp(-alpha))
    total = weights.sum()
    # An alpha of -inf zeroes every weight; start over from uniform weights.
    if not (math.isfinite(total) and total > 0):
        return numpy.full(weights.shape[0], 1.0 / weights.shape[0])
    return weights / total


def train_adaboost(
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
    labels: collections.abc.Sequence[Any] | LabelVector,
    *,
    iterations: int = 50,
    max_alpha: float = 2.5,
    max_depth: int = 1,
    criterion: Criterion | str = Criterion.GINI,
    rng: numpy.random.Generator | int | None = None,
    verbose: bool = False,
) -> AdaBoost:
    """
    Train an AdaBoost ensemble of depth-limited decision trees.

    Every iteration trains a tree on the current dataset, derives its vote
    weight from its error rate, reweights the samples towards the ones it
    got wrong and draws the next dataset from those weights. Training stops
    early once a tree classifies its whole training set correctly.

    Args:
        features: training features, one row per sample
        labels: training labels
        iterations: maximum number of trees, at least 1
        max_alpha: cap on the vote weight stored for any tree. The default
            2.5 corresponds to an accuracy of about 99.3%; larger values let
            a near-perfect tree dominate the vote.
        max_depth: depth of every tree; 1 trains decision stumps
        criterion: split criterion of the trees
        rng: random generator or seed used for resampling
        verbose: if True, print progress information

    Returns:
        The trained AdaBoost model

    Raises:
        InvalidConfigurationError: if iterations < 1 or the criterion is unknown
        EmptyInputError: if there are no samples
        InvalidInputError: if features and labels do not describe the same samples
    """
    if iterations < 1:
        raise InvalidConfigurationError("iterations must be at least 1.")
    criterion = as_criterion(criterion)
    features, labels = as_training_set(features, labels, allow_empty=False)
    rng = numpy.random.default_rng(rng)

    n_samples = labels.shape[0]
    weights = numpy.full(n_samples, 1.0 / n_samples)

    learners: list[TreeNode] = []
    alphas: list[float] = []
    rounds: list[BoostingRound] = []
    distinct_labels = tuple(dict.fromkeys(labels.tolist()))

    for i in range(1, iterations + 1):
        tree = train_tree(features, labels, max_depth=max_depth, criterion=criterion)
        predictions = predict_rows(tree, features).tolist()
        misclassified = numpy.array(
            [p != t for p, t in zip(predictions, labels.tolist())], dtype=bool
        )
        error = float(misclassified.mean())
        alpha = compute_alpha(error)
        vote = min(alpha, max_alpha)

        learners.append(tree)
        alphas.append(vote)
        rounds.append(BoostingRound(iteration=i, error=error, alpha=alpha, vote=vote))

        if verbose:
            print(f"Iteration {i}: error={error:.4f}, alpha={alpha:.4f}, vote={vote:.4f}")

        # Nothing left to correct.
        if alpha == math.inf:
            if verbose:
                print(f"Perfect fit after {i} iterations, stopping.")
            break

        weights = _update_weights(weights, misclassified, alpha)
        features, labels = create_weighted_dataset(features, labels, weights, rng)

    return AdaBoost(
        learners=tuple(learners),
        alphas=tuple(alphas),
        labels=distinct_labels,
        rounds=tuple(rounds),
    )


def predict_adaboost(
    model: AdaBoost,
    features: collections.abc.Sequence[collections.abc.Sequence[float]] | FeatureMatrix,
) -> LabelVector:
    """
    Predict labels by weighted vote.

    Each tree adds its alpha to the score of the label it predicts; the label
    with the highest total wins, ties going to the label seen first in training.
    """
    features = numpy.asarray(features, dtype=numpy.float64)
    if features.ndim != 2:
        raise InvalidInputError("Features must be a 2-dimensional matrix.")

    n_samples = features.shape[0]
    label_index = {label: k for k, label in enumerate(model.labels)}
    scores = numpy.zeros((n_samples, len(model.labels)), dtype=numpy.float64)

    for tree, alpha in zip(model.learners, model.alphas):
        predicted = predict_rows(tree, features).tolist()
        columns = numpy.array([label_index[p] for p in predicted], dtype=numpy.intp)
        scores[numpy.arange(n_samples), columns] += alpha

    winners = numpy.argmax(scores, axis=1)
    predictions = numpy.empty(n_samples, dtype=object)
    for i, k in enumerate(winners.tolist()):
        predictions[i] = model.labels[k]
    return as_label_array(predictions)
