#!/usr/bin/env python3
"""Compare bdt decision trees and AdaBoost against sklearn on one dataset.

Data Pipeline:
    1. Load a dataset, either from PMLB (--dataset) or a CSV file (--csv)
    2. Split into train/test sets (80/20)
    3. Train bdt and sklearn trees for every requested depth
    4. Train bdt and sklearn AdaBoost ensembles
    5. Print a table and optionally write it to CSV

Usage:
    python exp/compare.py --dataset iris
    python exp/compare.py --csv data/Iris.csv --label-column Species --depths 1,2,3
    python exp/compare.py --dataset iris --iterations 20 --output output/iris.csv -v
"""

from __future__ import annotations

import argparse
from pathlib import Path

from scripts.data.datasets import load_csv, load_pmlb
from scripts.experiments.comparison import compare_with_sklearn

DEFAULT_DATASET = "iris"
DEFAULT_DEPTHS = "1,3,5"
DEFAULT_ITERATIONS = 50
DEFAULT_SEED = 42


def parse_depths(depths_str: str) -> list[int]:
    return [int(d.strip()) for d in depths_str.split(",")]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Decision tree and AdaBoost comparison: bdt vs sklearn"
    )
    parser.add_argument(
        "--dataset",
        type=str,
        default=DEFAULT_DATASET,
        help=f"PMLB dataset name (default: {DEFAULT_DATASET})",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Load a CSV file instead of a PMLB dataset",
    )
    parser.add_argument(
        "--label-column",
        type=str,
        default="Species",
        help="Label column of the CSV file (default: Species)",
    )
    parser.add_argument(
        "--depths",
        type=str,
        default=DEFAULT_DEPTHS,
        help=f"Comma-separated tree depths (default: {DEFAULT_DEPTHS})",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"AdaBoost iterations (default: {DEFAULT_ITERATIONS})",
    )
    parser.add_argument(
        "--boost-depth",
        type=int,
        default=1,
        help="Depth of the trees inside AdaBoost (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed for shuffling, splitting and resampling (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV file path (default: print only)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable verbose output",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    if args.csv is not None:
        print(f"Loading CSV: {args.csv}")
        features, labels = load_csv(args.csv, args.label_column, rng=args.seed)
    else:
        print(f"Loading dataset: {args.dataset}")
        features, labels = load_pmlb(args.dataset)

    results = compare_with_sklearn(
        features,
        labels,
        max_depths=parse_depths(args.depths),
        iterations=args.iterations,
        boost_depth=args.boost_depth,
        random_state=args.seed,
        verbose=args.verbose,
    )

    if args.output is not None:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(output_path, index=False)
        print(f"Results saved to {output_path}")

    print("\nDone.")


if __name__ == "__main__":
    main()
