"""Tests for Square regions and quadrant classification."""

import random

import pytest

from gravity_model.spatial.region import Quadrant, Square
from gravity_model.validation import InvalidArgumentError


class TestSquareConstruction:
    """Tests for Square validation."""

    def test_creation(self):
        square = Square(1.0, 2.0, 10.0)
        assert square.center_x == 1.0
        assert square.center_y == 2.0
        assert square.side_length == 10.0
        assert square.half_size == 5.0

    def test_zero_side_allowed(self):
        assert Square(0.0, 0.0, 0.0).contains(0.0, 0.0)

    @pytest.mark.parametrize("side", [-1.0, float("nan"), float("inf")])
    def test_invalid_side_raises(self, side):
        with pytest.raises(InvalidArgumentError, match="side length"):
            Square(0.0, 0.0, side)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_invalid_center_raises(self, value):
        with pytest.raises(InvalidArgumentError):
            Square(value, 0.0, 1.0)
        with pytest.raises(InvalidArgumentError):
            Square(0.0, value, 1.0)


class TestContains:
    """Tests for point containment."""

    def test_contains(self):
        square = Square(0.0, 0.0, 10.0)

        # Points inside
        assert square.contains(0.0, 0.0)
        assert square.contains(-4.0, 3.0)

        # Points on boundary
        assert square.contains(5.0, 5.0)
        assert square.contains(-5.0, -5.0)

        # Points outside
        assert not square.contains(5.001, 0.0)
        assert not square.contains(0.0, -5.001)

    def test_non_finite_point_raises(self):
        with pytest.raises(InvalidArgumentError, match="Illegal x"):
            Square(0.0, 0.0, 10.0).contains(float("nan"), 0.0)


class TestQuadrants:
    """Tests for quadrant classification and subdivision."""

    def test_get_quadrant(self):
        square = Square(0.0, 0.0, 10.0)
        assert square.get_quadrant(-1.0, 1.0) == Quadrant.NW
        assert square.get_quadrant(1.0, 1.0) == Quadrant.NE
        assert square.get_quadrant(-1.0, -1.0) == Quadrant.SW
        assert square.get_quadrant(1.0, -1.0) == Quadrant.SE

    def test_ties_go_north_east(self):
        square = Square(0.0, 0.0, 10.0)
        assert square.get_quadrant(0.0, 0.0) == Quadrant.NE
        assert square.get_quadrant(0.0, -1.0) == Quadrant.SE
        assert square.get_quadrant(-1.0, 0.0) == Quadrant.NW

    def test_sub_squares(self):
        square = Square(0.0, 0.0, 8.0)
        assert square.sub_square(Quadrant.NW) == Square(-2.0, 2.0, 4.0)
        assert square.sub_square(Quadrant.NE) == Square(2.0, 2.0, 4.0)
        assert square.sub_square(Quadrant.SW) == Square(-2.0, -2.0, 4.0)
        assert square.sub_square(Quadrant.SE) == Square(2.0, -2.0, 4.0)

    def test_sub_square_contains_its_points(self):
        square = Square(3.0, -7.0, 16.0)
        for x, y in [(4.0, -6.0), (-1.0, -2.0), (10.0, -14.0), (3.0, -7.0)]:
            quadrant = square.get_quadrant(x, y)
            assert square.sub_square(quadrant).contains(x, y)

    def test_invalid_quadrant_raises(self):
        with pytest.raises(InvalidArgumentError, match="Invalid quadrant"):
            Square(0.0, 0.0, 1.0).sub_square(7)


class TestBounds:
    """Tests for square edges shared between parents and children."""

    def test_default_bounds(self):
        assert Square(1.0, -2.0, 10.0).bounds == (-4.0, -7.0, 6.0, 3.0)

    def test_bounds_do_not_affect_equality(self):
        assert Square(0.0, 0.0, 2.0, bounds=(-1.0, -1.0, 1.0, 1.0)) == Square(0.0, 0.0, 2.0)

    def test_non_finite_bounds_raise(self):
        with pytest.raises(InvalidArgumentError, match="Illegal bounds"):
            Square(0.0, 0.0, 2.0, bounds=(float("-inf"), -1.0, 1.0, 1.0))

    def test_centre_outside_bounds_raises(self):
        with pytest.raises(InvalidArgumentError, match="outside bounds"):
            Square(5.0, 0.0, 2.0, bounds=(-1.0, -1.0, 1.0, 1.0))

    def test_inner_edges_are_parent_centre_lines(self):
        square = Square(1.2000000000000002, 1.2000000000000002, 2.2000000000000006)
        c = square.center_x

        ne = square.sub_square(Quadrant.NE)
        assert ne.bounds[0] == c
        assert ne.bounds[1] == c

        sw = square.sub_square(Quadrant.SW)
        assert sw.bounds[2] == c
        assert sw.bounds[3] == c

        nw = square.sub_square(Quadrant.NW)
        assert nw.bounds[1] == c
        assert nw.bounds[2] == c

    def test_outer_edges_are_inherited(self):
        square = Square(0.3, 0.7, 1.1)
        min_x, min_y, max_x, max_y = square.bounds
        ne = square.sub_square(Quadrant.NE)
        assert ne.bounds[2] == max_x
        assert ne.bounds[3] == max_y
        sw = square.sub_square(Quadrant.SW)
        assert sw.bounds[0] == min_x
        assert sw.bounds[1] == min_y

    def test_centre_point_contained_in_its_sub_square(self):
        rng = random.Random(5)
        for _ in range(20_000):
            c = rng.uniform(-1e3, 1e3)
            square = Square(c, c, rng.uniform(1e-3, 1e3))
            assert square.sub_square(square.get_quadrant(c, c)).contains(c, c)

    def test_nested_sub_squares_keep_their_points(self):
        rng = random.Random(8)
        for _ in range(500):
            square = Square(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(0.1, 100))
            min_x, min_y, max_x, max_y = square.bounds
            x = rng.uniform(min_x, max_x)
            y = rng.uniform(min_y, max_y)
            for _ in range(30):
                if not square.contains(x, y):
                    break
                # Snap the point onto a centre line now and then
                if rng.random() < 0.3:
                    x = square.center_x
                square = square.sub_square(square.get_quadrant(x, y))
                assert square.contains(x, y)
