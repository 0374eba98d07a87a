"""Random samples, their summary statistics and text histograms."""

from __future__ import annotations

import math
import random
import sys
from typing import Iterator, Sequence, TextIO

__all__ = [
    "gen_uniform",
    "gen_normal",
    "mean",
    "std_dev",
    "histogram",
    "format_histogram",
    "main",
]

VARIANT = 13
_BAR_WIDTH = 50


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")


def gen_uniform(
    size: int, a: float, b: float, rng: random.Random | None = None
) -> list[float]:
    """Return size values drawn uniformly from [a, b)."""
    _check_size(size)
    if a > b:
        raise ValueError(f"lower bound {a} is above upper bound {b}")
    rng = rng if rng is not None else random.Random()
    width = b - a
    return [a + width * rng.random() for _ in range(size)]


def gen_normal(
    size: int, mean: float, stddev: float, rng: random.Random | None = None
) -> list[float]:
    """Return size values drawn from a normal distribution."""
    _check_size(size)
    if stddev <= 0:
        raise ValueError(f"standard deviation must be positive, got {stddev}")
    rng = rng if rng is not None else random.Random()
    return [rng.gauss(mean, stddev) for _ in range(size)]


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    if not values:
        raise ValueError("mean of an empty sample is undefined")
    return sum(values) / len(values)


def std_dev(values: Sequence[float], mean_value: float) -> float:
    """Population standard deviation of the values around mean_value."""
    if not values:
        raise ValueError("standard deviation of an empty sample is undefined")
    return math.sqrt(sum((x - mean_value) ** 2 for x in values) / len(values))


def histogram(values: Sequence[float]) -> list[tuple[float, float, int]]:
    """Bin the values by Sturges' rule.

    Returns (interval start, interval end, count) for every non-empty bin,
    in ascending order. The maximum lands in a bin of its own past the last
    regular one, as the bin index is truncated and not clamped.
    """
    if not values:
        raise ValueError("histogram of an empty sample is undefined")
    size = len(values)
    low = min(values)
    high = max(values)
    num_bins = int(1 + 3.322 * math.log10(size))
    bin_width = (high - low) / num_bins

    counts: dict[int, int] = {}
    for value in values:
        index = int((value - low) / bin_width) if bin_width else 0
        counts[index] = counts.get(index, 0) + 1

    result = []
    for index in sorted(counts):
        start = low + index * bin_width
        result.append((start, start + bin_width, counts[index]))
    return result


def format_histogram(values: Sequence[float]) -> str:
    """Render the histogram of the values as rows of stars."""
    size = len(values)
    lines = ["\n=== Histogram ===\n"]
    for start, end, count in histogram(values):
        lines.append(f"[{start:g} - {end:g}]: {'*' * (count * _BAR_WIDTH // size)}\n")
    return "".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


_MENU = (
    "\nMenu:\n"
    "1. Generate uniform distribution array\n"
    "2. Generate normal distribution array\n"
    "3. Calculate mean and standard deviation\n"
    "4. Create histogram\n"
    "0. Exit\n"
    "Your choice: "
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    out = sys.stdout
    tokens = _tokens(sys.stdin)
    current: list[float] | None = None

    while True:
        out.write(_MENU)
        choice = _read_int(tokens)
        if choice is None or choice == 0:
            break

        if choice in (1, 2):
            out.write("Enter size of array: ")
            size = _read_int(tokens)
            if size is None:
                break
            try:
                if choice == 1:
                    current = gen_uniform(size, 0.0, VARIANT * 10.0)
                else:
                    current = gen_normal(size, VARIANT * 5.0, VARIANT * 2.5)
            except ValueError as exc:
                out.write(f"Error: {exc}\n")
        elif choice in (3, 4):
            if current is None:
                out.write("Generate an array first!\n")
                continue
            try:
                if choice == 3:
                    m = mean(current)
                    s = std_dev(current, m)
                    out.write(f"Mean: {m:g}\nStandard Deviation: {s:g}\n")
                else:
                    out.write(format_histogram(current))
            except ValueError as exc:
                out.write(f"Error: {exc}\n")
        else:
            out.write("Invalid choice!\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())