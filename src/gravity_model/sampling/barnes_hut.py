"""
Barnes-Hut gravity-weighted sampler.

Bodies are aggregated into a quadtree of centres of mass. A query walks the
tree top-down: at each level the subtree is cut into candidate nodes by the
opening-angle rule, one candidate is chosen by weight, and the walk
continues inside it with half the opening angle until a leaf is reached.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from ..spatial.quadtree import DEFAULT_MAX_DEPTH, QuadTreeNode, bounding_square
from ..types import Body2D
from ..validation import (
    CoincidentBodiesError,
    EmptyBodiesError,
    InvalidArgumentError,
    validate_theta,
)
from .base import GravitySampler, warn_if_massless


class BarnesHutSampler(GravitySampler[Body2D[Any]]):
    """
    Approximate gravity-weighted sampler over planar bodies.

    The sampler treats a distant cluster of bodies as a single body at its
    centre of mass, so a query does not need the force of every body. A
    node counts as distant when side_length / distance < theta.

    Usage:
        sampler = BarnesHutSampler(
            [Body2D(-10, -10, mass=1000, value="a"),
             Body2D(10, 10, mass=1000, value="b")],
            theta=0.5,
            random_seed=42,
        )
        value = sampler.sample(0.0, 0.0)

    The theta parameter controls the accuracy/speed tradeoff:
    - theta = 0: Every query expands the tree down to individual bodies
    - theta = 0.5: Good balance (recommended)
    - theta large: The root stands in for everything until theta has been
      halved enough times to open it

    Theta is halved at every level of the walk, so the choice gets finer as
    the walk approaches the bodies near the reference.

    Each query takes a single uniform draw and reuses it unchanged at every
    level of the walk. With theta > 0 this correlates the choices made at
    different levels.
    """

    def __init__(
        self,
        bodies: Sequence[Body2D[Any]],
        theta: float = 0.5,
        *,
        rng: Optional[random.Random] = None,
        random_seed: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """
        Build the quadtree.

        Args:
            bodies: Bodies to sample from
            theta: Barnes-Hut threshold (0 = exact, higher = more approximation)
            rng: Random source to draw from
            random_seed: Seed for a private random source
            max_depth: Maximum number of subdivisions below the root

        Raises:
            EmptyBodiesError: If bodies is empty
            InvalidThetaError: If theta is negative or non-finite
            InvalidArgumentError: If a body is not a Body2D, or max_depth < 1
            CoincidentBodiesError: If two bodies share a position
        """
        super().__init__(rng=rng, random_seed=random_seed)

        bodies = list(bodies)
        if not bodies:
            raise EmptyBodiesError("No bodies")
        self._theta = validate_theta(theta)
        if max_depth < 1:
            raise InvalidArgumentError(f"max_depth must be >= 1, got {max_depth}")
        for body in bodies:
            if not isinstance(body, Body2D):
                raise InvalidArgumentError(
                    f"BarnesHutSampler needs Body2D bodies, got {type(body).__name__}"
                )
        _check_distinct_positions(bodies)
        warn_if_massless(bodies)

        self._root = QuadTreeNode(bodies[0], bounding_square(bodies), max_depth=max_depth)
        for body in bodies[1:]:
            self._root.insert(body)
        self._body_count = len(bodies)

    @classmethod
    def from_arrays(
        cls,
        xs: Sequence[float],
        ys: Sequence[float],
        masses: Optional[Sequence[float]] = None,
        values: Optional[Sequence[Any]] = None,
        theta: float = 0.5,
        *,
        rng: Optional[random.Random] = None,
        random_seed: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Self:
        """
        Build a sampler from coordinate arrays.

        Args:
            xs, ys: Body coordinates
            masses: Body masses (default 1.0 each)
            values: Body values (default the row index)
            theta: Barnes-Hut threshold

        Raises:
            InvalidArgumentError: If the arrays are not 1-D or differ in length
        """
        x_arr = np.asarray(xs, dtype=np.float64)
        y_arr = np.asarray(ys, dtype=np.float64)
        if x_arr.ndim != 1 or x_arr.shape != y_arr.shape:
            raise InvalidArgumentError(
                f"xs and ys must be 1-D and the same length, got {x_arr.shape} and {y_arr.shape}"
            )
        n = len(x_arr)

        mass_arr = np.ones(n) if masses is None else np.asarray(masses, dtype=np.float64)
        if mass_arr.shape != x_arr.shape:
            raise InvalidArgumentError(f"Expected {n} masses, got shape {mass_arr.shape}")

        value_list = list(range(n)) if values is None else list(values)
        if len(value_list) != n:
            raise InvalidArgumentError(f"Expected {n} values, got {len(value_list)}")

        bodies = [
            Body2D(float(x), float(y), mass=float(m), value=v)
            for x, y, m, v in zip(x_arr, y_arr, mass_arr, value_list)
        ]
        return cls(bodies, theta, rng=rng, random_seed=random_seed, max_depth=max_depth)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def root(self) -> QuadTreeNode:
        return self._root

    @property
    def body_count(self) -> int:
        return self._body_count

    @property
    def theta(self) -> float:
        """Get the opening angle queries start from."""
        return self._theta

    @theta.setter
    def theta(self, value: float) -> None:
        """Set the opening angle (finite, >= 0)."""
        self._theta = validate_theta(value)

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self, x: float, y: float) -> Any:
        """
        Draw a body weighted by its force on a unit mass at (x, y).

        Returns:
            The value of the chosen body

        Raises:
            InvalidArgumentError: If x or y is not finite
            NoForceError: If no body exerts any force on (x, y)
        """
        return self.random_body(Body2D.at(x, y)).value

    def random_body(self, reference: Body2D[Any]) -> Body2D[Any]:
        self._check_reference(reference, Body2D)

        rand = self._draw()
        node = self._root
        theta = self._theta
        while True:
            candidates = node.collect_candidates(reference, theta)
            weights = [c.centre_of_mass.gravity_force(reference) for c in candidates]
            node = candidates[self._choose(weights, rand)]
            if node.is_leaf():
                return node.centre_of_mass
            theta /= 2

    def __repr__(self) -> str:
        return f"BarnesHutSampler(bodies={self._body_count}, theta={self._theta})"


def _check_distinct_positions(bodies: Sequence[Body2D[Any]]) -> None:
    seen: dict[tuple[float, float], int] = {}
    for i, body in enumerate(bodies):
        position = (body.x, body.y)
        if position in seen:
            raise CoincidentBodiesError(
                f"Bodies {seen[position]} and {i} share the position {position}"
            )
        seen[position] = i


__all__ = ["BarnesHutSampler"]
