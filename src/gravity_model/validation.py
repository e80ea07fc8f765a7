"""
Input validation utilities for gravity model sampling.

Provides the exception hierarchy shared by every sampler, plus centralized
validation functions for masses, coordinates, theta and random draws.
Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from typing import Any


class ValidationError(ValueError):
    """Base exception for caller errors."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when an argument is outside its valid domain."""

    pass


class InvalidBodyError(InvalidArgumentError):
    """Raised when a body has an invalid mass or coordinate."""

    pass


class InvalidThetaError(InvalidArgumentError):
    """Raised when the opening angle is negative or non-finite."""

    pass


class EmptyBodiesError(InvalidArgumentError):
    """Raised when a sampler is built from no bodies."""

    pass


class CoincidentBodiesError(InvalidArgumentError):
    """Raised when bodies share a position the quadtree cannot separate."""

    pass


class StructuralViolationError(InvalidArgumentError):
    """Raised when a body is placed in a region that does not contain it."""

    pass


class NoForceError(ValidationError):
    """Raised when no candidate exerts any force on the reference point."""

    pass


class UnreachableSelectionError(RuntimeError):
    """
    Raised when weighted selection fails despite a positive total weight.

    This signals a broken cumulative sum, not a caller error.
    """

    pass


class ZeroMassWarning(UserWarning):
    """Warning issued when every body in a sampler has zero mass."""

    pass


def validate_finite(value: Any, name: str) -> float:
    """
    Validate that a value is a finite float.

    Args:
        value: Value to check
        name: Name used in the error message

    Returns:
        The value as a float

    Raises:
        InvalidArgumentError: If the value is NaN or infinite
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")
    return value


def validate_non_negative(value: Any, name: str) -> float:
    """
    Validate that a value is a finite, non-negative float.

    Raises:
        InvalidArgumentError: If the value is negative, NaN or infinite
    """
    value = validate_finite(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")
    return value


def validate_theta(theta: Any) -> float:
    """
    Validate the Barnes-Hut opening angle.

    Args:
        theta: Opening angle (0 = exact, higher = more approximation)

    Returns:
        Validated theta

    Raises:
        InvalidThetaError: If theta is negative, NaN or infinite
    """
    theta = float(theta)
    if not math.isfinite(theta) or theta < 0:
        raise InvalidThetaError(f"theta must be finite and >= 0, got {theta}")
    return theta


def validate_unit_interval(rand: Any) -> float:
    """
    Validate a uniform random draw.

    Raises:
        InvalidArgumentError: If rand is not in [0, 1)
    """
    rand = float(rand)
    if not 0.0 <= rand < 1.0:
        raise InvalidArgumentError(f"random draw must be in [0, 1), got {rand}")
    return rand


def validate_trials(trials: int) -> int:
    """
    Validate a trial count is positive.

    Raises:
        ValidationError: If trials < 1
    """
    if trials < 1:
        raise ValidationError(f"trials must be >= 1, got {trials}")
    return trials


__all__ = [
    "ValidationError",
    "InvalidArgumentError",
    "InvalidBodyError",
    "InvalidThetaError",
    "EmptyBodiesError",
    "CoincidentBodiesError",
    "StructuralViolationError",
    "NoForceError",
    "UnreachableSelectionError",
    "ZeroMassWarning",
    "validate_finite",
    "validate_non_negative",
    "validate_theta",
    "validate_unit_interval",
    "validate_trials",
]
