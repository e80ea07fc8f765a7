"""
Sampling quality metrics.

Provides quantitative measures of how closely a sampler follows the exact
gravity-weighted distribution:
- Gravity weights: Force of each body on a reference
- Exact probabilities: Normalized gravity weights
- Empirical frequencies: Observed share of each value over many draws
- Total variation distance: Largest difference in probability mass

All metrics work with any sampler and any body type.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Sequence

import numpy as np

from .sampling.base import GravitySampler
from .types import Body
from .validation import NoForceError, ValidationError, validate_trials


def gravity_weights(bodies: Sequence[Body[Any]], reference: Body[Any]) -> np.ndarray:
    """
    Compute the force of every body on the reference.

    Args:
        bodies: Bodies of the same type as reference
        reference: Reference body

    Returns:
        Array of forces, in body order

    Time Complexity: O(n)
    """
    return np.array([body.gravity_force(reference) for body in bodies], dtype=np.float64)


def exact_probabilities(bodies: Sequence[Body[Any]], reference: Body[Any]) -> np.ndarray:
    """
    Compute the probability of drawing each body with an exact sampler.

    Raises:
        NoForceError: If no body exerts any force on the reference
    """
    weights = gravity_weights(bodies, reference)
    total = weights.sum()
    if total <= 0:
        raise NoForceError("No body exerts any force on the reference")
    return weights / total


def empirical_frequencies(
    sampler: GravitySampler[Any],
    reference: Body[Any],
    trials: int,
) -> Dict[Any, float]:
    """
    Draw repeatedly from a sampler and measure how often each value comes up.

    Args:
        sampler: Sampler to draw from
        reference: Reference body passed to every draw
        trials: Number of draws

    Returns:
        Dict mapping each drawn value to its share of the draws. Values that
        were never drawn are absent.
    """
    trials = validate_trials(trials)
    counts = Counter(sampler.sample_value(reference) for _ in range(trials))
    return {value: count / trials for value, count in counts.items()}


def total_variation_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """
    Total variation distance between two probability vectors.

    Half the L1 distance: 0 for identical distributions, 1 for disjoint ones.

    Raises:
        ValidationError: If the vectors differ in length
    """
    p_arr = np.asarray(p, dtype=np.float64)
    q_arr = np.asarray(q, dtype=np.float64)
    if p_arr.shape != q_arr.shape:
        raise ValidationError(
            f"Probability vectors differ in shape: {p_arr.shape} vs {q_arr.shape}"
        )
    return float(np.abs(p_arr - q_arr).sum() / 2)


__all__ = [
    "gravity_weights",
    "exact_probabilities",
    "empirical_frequencies",
    "total_variation_distance",
]
