"""
Weighted random index selection.

Each index owns a slice of [0, 1) as wide as its normalized weight.
Whichever slice a uniform draw lands in is the chosen index:

    [[_____w0_____][__w1__][____________w2____________]]
    0========================.5========================1

    rand = 0.1 -> 0, rand = 0.4 -> 1, rand = 0.7 -> 2
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..validation import (
    InvalidArgumentError,
    UnreachableSelectionError,
    validate_unit_interval,
)


def cumulative_sum(values: Sequence[float]) -> np.ndarray:
    """Running sum of values."""
    return np.cumsum(np.asarray(values, dtype=np.float64))


def choose_index_by_weight(weights: Sequence[float], rand: float) -> int:
    """
    Choose an index with probability proportional to its weight.

    Args:
        weights: Finite, non-negative weights with a positive sum
        rand: Uniform random draw in [0, 1)

    Returns:
        The first index whose normalized cumulative weight is strictly
        greater than rand. Zero weights are never chosen.

    Raises:
        InvalidArgumentError: If rand is outside [0, 1), or weights are empty,
            negative, non-finite, or sum to zero
        UnreachableSelectionError: If no index qualifies (broken cumulative sum)
    """
    rand = validate_unit_interval(rand)
    arr = np.asarray(weights, dtype=np.float64)

    if arr.size == 0:
        raise InvalidArgumentError("No weights to choose from")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError(f"Weights must be finite, got {arr.tolist()}")
    if np.any(arr < 0):
        raise InvalidArgumentError(f"Weights must be >= 0, got {arr.tolist()}")

    cumulative = cumulative_sum(arr)
    total = cumulative[-1]
    if not total > 0 or not np.isfinite(total):
        raise InvalidArgumentError(f"Weights sum to invalid value: {total}")

    # Dividing the running sum by its own last entry makes that entry exactly 1.0
    cumulative = cumulative / total
    index = int(np.searchsorted(cumulative, rand, side="right"))
    if index >= len(cumulative):
        raise UnreachableSelectionError(
            f"No cumulative weight exceeds {rand}: {cumulative.tolist()}"
        )
    return index


__all__ = ["cumulative_sum", "choose_index_by_weight"]
