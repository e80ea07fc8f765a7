"""
Base class for gravity model samplers.

A sampler draws a body with probability proportional to the gravitational
force it exerts on a reference body. This module provides the shared
infrastructure:

- Random source injection (an explicit ``random.Random`` or a seed)
- Reference body checks
- Weighted choice that refuses to pick when no candidate exerts force
"""

from __future__ import annotations

import random
import warnings
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from ..types import Body
from ..validation import InvalidArgumentError, NoForceError, ZeroMassWarning
from .weighted import choose_index_by_weight

B = TypeVar("B", bound=Body[Any])


class GravitySampler(ABC, Generic[B]):
    """
    Abstract base class for gravity-weighted samplers.

    Each query takes exactly one uniform draw from the sampler's random
    source, so seeding the source makes queries reproducible.

    Example:
        sampler = SomeSampler(bodies, random_seed=42)
        body = sampler.random_body(reference)
        value = sampler.sample_value(reference)
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        random_seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random source.

        Args:
            rng: Random source to draw from. Takes precedence over random_seed.
            random_seed: Seed for a private random source
        """
        self._random_seed: Optional[int] = random_seed
        self._rng: random.Random = rng if rng is not None else random.Random(random_seed)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def rng(self) -> random.Random:
        """Get the random source."""
        return self._rng

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for reproducible sampling."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        """Set random seed, replacing the random source with a freshly seeded one."""
        self._random_seed = value
        self._rng = random.Random(value)

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    @abstractmethod
    def random_body(self, reference: B) -> B:
        """
        Draw a body weighted by the force it exerts on reference.

        Raises:
            InvalidArgumentError: If reference has the wrong type or no mass
            NoForceError: If no body exerts any force on reference
        """
        pass

    def sample_value(self, reference: B) -> Any:
        """Draw a body and return its value."""
        return self.random_body(reference).value

    def _draw(self) -> float:
        return self._rng.random()

    @staticmethod
    def _check_reference(reference: Body[Any], body_type: Type[Body[Any]]) -> None:
        if not isinstance(reference, body_type):
            raise InvalidArgumentError(
                f"Reference must be a {body_type.__name__}, got {type(reference).__name__}"
            )
        if reference.mass == 0:
            raise InvalidArgumentError("Reference point cannot have 0 mass")

    @staticmethod
    def _choose(weights: Sequence[float], rand: float) -> int:
        if not any(w > 0 for w in weights):
            raise NoForceError(
                f"None of the {len(weights)} candidate(s) exerts any force on the reference"
            )
        return choose_index_by_weight(weights, rand)


def warn_if_massless(bodies: Sequence[Body[Any]]) -> None:
    """Warn when every body has zero mass, since every query would then fail."""
    if all(body.mass == 0 for body in bodies):
        warnings.warn(
            f"All {len(bodies)} bodies have zero mass. "
            "Every sample will raise NoForceError.",
            ZeroMassWarning,
            stacklevel=3,
        )


__all__ = ["GravitySampler", "warn_if_massless"]
