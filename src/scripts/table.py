"""Table printing utilities for experiments."""

from typing import Any

COLUMNS: list[tuple[str, str]] = [
    ("model", "model"),
    ("depth", "depth"),
    ("size", "size"),
    ("train_acc", "train"),
    ("test_acc", "test"),
    ("time", "time"),
]


def compute_column_widths(
    max_model_name: int,
    *,
    w_depth: int = 5,
    w_size: int = 5,
    w_acc: int = 6,
    w_time: int = 8,
) -> dict[str, int]:
    """Compute column widths based on max values and header lengths."""
    return {
        "model": max(max_model_name, len("model")),
        "depth": max(w_depth, len("depth")),
        "size": max(w_size, len("size")),
        "train_acc": max(w_acc, len("train")),
        "test_acc": max(w_acc, len("test")),
        "time": max(w_time, len("time")),
    }


def print_header(widths: dict[str, int]) -> None:
    """Print table header."""
    print(" | ".join(f"{title:^{widths[key]}}" for key, title in COLUMNS) + " |")
    total_width = sum(widths.values()) + (len(COLUMNS) - 1) * 3 + 2
    print("-" * total_width)


def _fmt(value: Any, spec: str) -> str:
    return "-" if value is None else format(value, spec)


def print_row(row: dict[str, Any], widths: dict[str, int]) -> None:
    """Print a single result row."""
    print(
        f"{row['model']:<{widths['model']}} | "
        f"{_fmt(row['depth'], 'd'):>{widths['depth']}} | "
        f"{_fmt(row['size'], 'd'):>{widths['size']}} | "
        f"{_fmt(row['train_acc'], '.2%'):>{widths['train_acc']}} | "
        f"{_fmt(row['test_acc'], '.2%'):>{widths['test_acc']}} | "
        f"{_fmt(row['time'], '.4f'):>{widths['time']}} |"
    )
