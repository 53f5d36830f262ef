from bdt.adaboost import AdaBoost, BoostingRound, predict_adaboost, train_adaboost
from bdt.builder import Criterion, predict_tree, train_tree
from bdt.classifier import AdaBoostClassifier, DecisionTreeClassifier
from bdt.impurity import entropy, gini_impurity, majority_label
from bdt.split import (
    best_categorical_split,
    best_split,
    categorical_information_gain,
    information_gain,
)
from bdt.stump import DecisionStump, predict_stump, train_stump
from bdt.tree import DecisionNode, LeafNode, TreeNode

__all__ = [
    "AdaBoost",
    "AdaBoostClassifier",
    "BoostingRound",
    "Criterion",
    "DecisionNode",
    "DecisionStump",
    "DecisionTreeClassifier",
    "LeafNode",
    "TreeNode",
    "best_categorical_split",
    "best_split",
    "categorical_information_gain",
    "entropy",
    "gini_impurity",
    "information_gain",
    "majority_label",
    "predict_adaboost",
    "predict_stump",
    "predict_tree",
    "train_adaboost",
    "train_stump",
    "train_tree",
]
