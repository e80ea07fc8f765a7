"""
Body types for gravity model sampling.

A body is an immutable weighted position with an optional payload. The
position is interpreted by the body's metric:

- Body1D: a point on a line
- Body2D: a point in the Cartesian plane (the only type the quadtree accepts)
- Body3D: a point in Cartesian space
- GISBody: a latitude/longitude pair, measured by great-circle distance

Bodies of different types cannot be combined or measured against each other.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, TypeVar

from .validation import InvalidArgumentError, InvalidBodyError

T = TypeVar("T")

EARTH_RADIUS_KM = 6371.0


class Body(ABC, Generic[T]):
    """
    Base class for a body with mass, position and value.

    Subclasses are frozen dataclasses that declare their coordinate fields
    followed by ``mass`` and ``value``.
    """

    mass: float
    value: Optional[T]

    def _validate(self, **coordinates: float) -> None:
        """Reject negative or non-finite masses and non-finite coordinates."""
        if not math.isfinite(self.mass) or self.mass < 0:
            raise InvalidBodyError(f"Illegal mass {self.mass}")
        for name, coordinate in coordinates.items():
            if not math.isfinite(coordinate):
                raise InvalidBodyError(f"Illegal {name} {coordinate}")

    def _check_same_type(self, other: Body[Any], action: str) -> None:
        if type(other) is not type(self):
            raise InvalidArgumentError(
                f"Cannot {action} {type(self).__name__} and {type(other).__name__}"
            )

    @property
    @abstractmethod
    def coordinates(self) -> Tuple[float, ...]:
        """Position of this body as a tuple."""

    @classmethod
    @abstractmethod
    def at(cls, *coordinates: float, mass: float = 1.0, value: Any = None) -> Body[Any]:
        """Build a body of this type at the given coordinates."""

    @abstractmethod
    def distance_to(self, other: Body[Any]) -> float:
        """Distance to another body of the same type."""

    def combine(self, other: Body[Any]) -> Body[Any]:
        """
        Combine two bodies into their centre of mass.

        The result carries the summed mass at the mass-weighted average
        position, and no value. A zero combined mass is placed at the origin.
        """
        self._check_same_type(other, "combine")
        mass = self.mass + other.mass
        if mass == 0:
            return self.at(*(0.0 for _ in self.coordinates), mass=0.0)
        return self.at(
            *(
                (a * self.mass + b * other.mass) / mass
                for a, b in zip(self.coordinates, other.coordinates)
            ),
            mass=mass,
        )

    def gravity_force(self, other: Body[Any]) -> float:
        """
        Gravitational force between two bodies with G factored out.

        A zero distance is clamped to 1 so coincident bodies get a finite
        force equal to the product of their masses.
        """
        if self.mass == 0 or other.mass == 0:
            return 0.0
        distance = self.distance_to(other)
        if distance == 0:
            distance = 1.0
        return self.mass * other.mass / (distance * distance)


@dataclass(frozen=True)
class Body1D(Body[T]):
    """A body on a line."""

    x: float
    mass: float = 1.0
    value: Optional[T] = None

    def __post_init__(self) -> None:
        self._validate(x=self.x)

    @property
    def coordinates(self) -> Tuple[float, ...]:
        return (self.x,)

    @classmethod
    def at(cls, *coordinates: float, mass: float = 1.0, value: Any = None) -> Body1D[Any]:
        (x,) = coordinates
        return cls(x, mass=mass, value=value)

    def distance_to(self, other: Body[Any]) -> float:
        self._check_same_type(other, "measure distance between")
        assert isinstance(other, Body1D)
        return abs(self.x - other.x)


@dataclass(frozen=True)
class Body2D(Body[T]):
    """A body in the plane, with Euclidean distance."""

    x: float
    y: float
    mass: float = 1.0
    value: Optional[T] = None

    def __post_init__(self) -> None:
        self._validate(x=self.x, y=self.y)

    @property
    def coordinates(self) -> Tuple[float, ...]:
        return (self.x, self.y)

    @classmethod
    def at(cls, *coordinates: float, mass: float = 1.0, value: Any = None) -> Body2D[Any]:
        x, y = coordinates
        return cls(x, y, mass=mass, value=value)

    def distance_to(self, other: Body[Any]) -> float:
        self._check_same_type(other, "measure distance between")
        assert isinstance(other, Body2D)
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Body3D(Body[T]):
    """A body in space, with Euclidean distance."""

    x: float
    y: float
    z: float
    mass: float = 1.0
    value: Optional[T] = None

    def __post_init__(self) -> None:
        self._validate(x=self.x, y=self.y, z=self.z)

    @property
    def coordinates(self) -> Tuple[float, ...]:
        return (self.x, self.y, self.z)

    @classmethod
    def at(cls, *coordinates: float, mass: float = 1.0, value: Any = None) -> Body3D[Any]:
        x, y, z = coordinates
        return cls(x, y, z, mass=mass, value=value)

    def distance_to(self, other: Body[Any]) -> float:
        self._check_same_type(other, "measure distance between")
        assert isinstance(other, Body3D)
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)


@dataclass(frozen=True)
class GISBody(Body[T]):
    """
    A body at a latitude/longitude in degrees.

    Distances are great-circle distances in kilometres (haversine formula).
    This is noticeably slower than a Body2D on projected coordinates, so
    prefer that unless the extra precision matters.
    """

    lat: float
    lon: float
    mass: float = 1.0
    value: Optional[T] = None

    def __post_init__(self) -> None:
        self._validate(lat=self.lat, lon=self.lon)

    @property
    def coordinates(self) -> Tuple[float, ...]:
        return (self.lat, self.lon)

    @classmethod
    def at(cls, *coordinates: float, mass: float = 1.0, value: Any = None) -> GISBody[Any]:
        lat, lon = coordinates
        return cls(lat, lon, mass=mass, value=value)

    def distance_to(self, other: Body[Any]) -> float:
        self._check_same_type(other, "measure distance between")
        assert isinstance(other, GISBody)
        lat_distance = math.radians(other.lat - self.lat)
        lon_distance = math.radians(other.lon - self.lon)
        a = (
            math.sin(lat_distance / 2) ** 2
            + math.cos(math.radians(other.lat))
            * math.cos(math.radians(self.lat))
            * math.sin(lon_distance / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_KM * c


def gravity_force(a: Body[Any], b: Body[Any]) -> float:
    """Force between two bodies, see ``Body.gravity_force``."""
    return a.gravity_force(b)


__all__ = [
    "EARTH_RADIUS_KM",
    "Body",
    "Body1D",
    "Body2D",
    "Body3D",
    "GISBody",
    "gravity_force",
]
