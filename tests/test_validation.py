"""Tests for input validation module."""

import pytest

from gravity_model.validation import (
    CoincidentBodiesError,
    EmptyBodiesError,
    InvalidArgumentError,
    InvalidBodyError,
    InvalidThetaError,
    NoForceError,
    StructuralViolationError,
    UnreachableSelectionError,
    ValidationError,
    ZeroMassWarning,
    validate_finite,
    validate_non_negative,
    validate_theta,
    validate_trials,
    validate_unit_interval,
)


class TestFiniteValidation:
    """Tests for finite and non-negative checks."""

    def test_valid_values(self):
        assert validate_finite(3, "x") == 3.0
        assert validate_finite(-2.5, "x") == -2.5
        assert validate_non_negative(0, "mass") == 0.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_raises(self, value):
        with pytest.raises(InvalidArgumentError, match="x must be finite"):
            validate_finite(value, "x")

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError, match="mass must be >= 0"):
            validate_non_negative(-1, "mass")


class TestThetaValidation:
    """Tests for theta validation."""

    def test_valid_theta(self):
        assert validate_theta(0) == 0.0
        assert validate_theta(0.5) == 0.5
        assert validate_theta(1e6) == 1e6

    @pytest.mark.parametrize("theta", [-0.1, float("nan"), float("inf")])
    def test_invalid_theta_raises(self, theta):
        with pytest.raises(InvalidThetaError, match="theta must be finite and >= 0"):
            validate_theta(theta)


class TestDrawValidation:
    """Tests for random draw and trial count validation."""

    def test_valid_draws(self):
        assert validate_unit_interval(0.0) == 0.0
        assert validate_unit_interval(0.999) == 0.999

    @pytest.mark.parametrize("rand", [1.0, -1e-9, 2.0, float("nan")])
    def test_invalid_draw_raises(self, rand):
        with pytest.raises(InvalidArgumentError, match=r"random draw must be in \[0, 1\)"):
            validate_unit_interval(rand)

    def test_trials(self):
        assert validate_trials(1) == 1
        with pytest.raises(ValidationError, match="trials must be >= 1"):
            validate_trials(0)


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidBodyError,
            InvalidThetaError,
            EmptyBodiesError,
            CoincidentBodiesError,
            StructuralViolationError,
        ],
    )
    def test_invalid_argument_subclasses(self, error):
        assert issubclass(error, InvalidArgumentError)
        assert issubclass(error, ValidationError)
        assert issubclass(error, ValueError)

    def test_no_force_is_validation_error(self):
        assert issubclass(NoForceError, ValidationError)
        assert not issubclass(NoForceError, InvalidArgumentError)

    def test_unreachable_is_not_a_caller_error(self):
        assert issubclass(UnreachableSelectionError, RuntimeError)
        assert not issubclass(UnreachableSelectionError, ValidationError)

    def test_zero_mass_warning(self):
        assert issubclass(ZeroMassWarning, UserWarning)
