"""
Exact gravity-weighted sampler.

Computes the force of every body on the reference for each query and makes
a single weighted choice over all of them. O(n) per query, with no
approximation, and usable with any body type. Serves as the baseline the
Barnes-Hut sampler is measured against.
"""

from __future__ import annotations

import random
from typing import Any, Optional, Sequence, Tuple

from ..types import Body
from ..validation import EmptyBodiesError, InvalidArgumentError
from .base import GravitySampler, warn_if_massless


class ExactSampler(GravitySampler[Body[Any]]):
    """
    Brute-force sampler over any body type.

    Example:
        sampler = ExactSampler(
            [GISBody(52.52, 13.40, mass=3.6e6, value="Berlin"),
             GISBody(48.86, 2.35, mass=2.1e6, value="Paris")],
            random_seed=7,
        )
        city = sampler.sample_value(GISBody.at(50.11, 8.68))
    """

    def __init__(
        self,
        bodies: Sequence[Body[Any]],
        *,
        rng: Optional[random.Random] = None,
        random_seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the sampler.

        Args:
            bodies: Bodies to sample from, all of the same type
            rng: Random source to draw from
            random_seed: Seed for a private random source

        Raises:
            EmptyBodiesError: If bodies is empty
            InvalidArgumentError: If bodies mix types
        """
        super().__init__(rng=rng, random_seed=random_seed)

        if not bodies:
            raise EmptyBodiesError("No bodies")
        body_type = type(bodies[0])
        for body in bodies:
            if type(body) is not body_type:
                raise InvalidArgumentError(
                    f"Cannot mix {body_type.__name__} and {type(body).__name__}"
                )
        warn_if_massless(bodies)

        self._bodies: Tuple[Body[Any], ...] = tuple(bodies)

    @property
    def bodies(self) -> Tuple[Body[Any], ...]:
        return self._bodies

    @property
    def body_count(self) -> int:
        return len(self._bodies)

    def random_body(self, reference: Body[Any]) -> Body[Any]:
        self._check_reference(reference, type(self._bodies[0]))
        forces = [body.gravity_force(reference) for body in self._bodies]
        return self._bodies[self._choose(forces, self._draw())]


__all__ = ["ExactSampler"]
