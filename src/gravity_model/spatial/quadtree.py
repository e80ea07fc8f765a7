"""
Quadtree of centres of mass for Barnes-Hut sampling.

The quadtree recursively subdivides 2D space into quadrants. Leaves hold
the original bodies; internal nodes hold the combined centre of mass of
every body inserted beneath them, so a whole subtree can stand in for its
bodies when it is far enough from a reference point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Sequence

from ..types import Body2D
from ..validation import (
    CoincidentBodiesError,
    EmptyBodiesError,
    InvalidArgumentError,
    StructuralViolationError,
)
from .region import Square

# Deep enough for bodies ~1e-38 of the root side apart, shallow enough for
# Python's recursion limit.
DEFAULT_MAX_DEPTH = 128


@dataclass(eq=False)
class QuadTreeNode:
    """
    A node in the quadtree.

    Attributes:
        centre_of_mass: The original body if this is a leaf, otherwise the
            combination of all bodies in this subtree
        region: Square covered by this subtree
        depth: Number of subdivisions from the root
        max_depth: Depth at which leaves may no longer be split
        children: Four child slots [NW, NE, SW, SE], None where empty
    """

    centre_of_mass: Body2D[Any]
    region: Square
    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH
    children: List[Optional[QuadTreeNode]] = field(
        default_factory=lambda: [None, None, None, None]
    )

    def __post_init__(self) -> None:
        if self.centre_of_mass is None:
            raise InvalidArgumentError("Null body")
        if self.region is None:
            raise InvalidArgumentError("Null region")
        self._check_body(self.centre_of_mass)

    def _check_body(self, body: Body2D[Any]) -> None:
        if not isinstance(body, Body2D):
            raise InvalidArgumentError(
                f"Quadtree nodes hold Body2D, got {type(body).__name__}"
            )
        if not self.region.contains(body.x, body.y):
            raise StructuralViolationError(
                f"Body at ({body.x}, {body.y}) is not contained within "
                f"this node's region {self.region}"
            )

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return all(child is None for child in self.children)

    def insert(self, body: Body2D[Any]) -> None:
        """
        Insert a body into the subtree rooted at this node.

        A leaf first pushes its own body down one level, so leaves always
        hold original bodies and internal nodes always hold aggregates.

        Raises:
            StructuralViolationError: If the body is outside this node's region
            CoincidentBodiesError: If the body cannot be separated from an
                existing one. The subtree is left partially updated.
        """
        self._check_body(body)

        if self.is_leaf():
            existing = self.centre_of_mass
            if existing.x == body.x and existing.y == body.y:
                raise CoincidentBodiesError(
                    f"Two bodies share the position ({body.x}, {body.y})"
                )
            if self.depth >= self.max_depth:
                raise CoincidentBodiesError(
                    f"Depth limit {self.max_depth} reached separating bodies at "
                    f"({existing.x}, {existing.y}) and ({body.x}, {body.y})"
                )
            self._insert_into_child(existing)

        self.centre_of_mass = self.centre_of_mass.combine(body)
        self._insert_into_child(body)

    def _insert_into_child(self, body: Body2D[Any]) -> None:
        """Insert body into the child covering its quadrant."""
        quadrant = self.region.get_quadrant(body.x, body.y)
        child = self.children[quadrant]

        if child is None:
            self.children[quadrant] = QuadTreeNode(
                body,
                self.region.sub_square(quadrant),
                depth=self.depth + 1,
                max_depth=self.max_depth,
            )
        else:
            child.insert(body)

    def collect_candidates(self, reference: Body2D[Any], theta: float) -> List[QuadTreeNode]:
        """
        Collect the nodes that stand in for this subtree at opening angle theta.

        A node is its own candidate if it is a leaf, or if it is far enough
        from the reference (side / distance < theta). Otherwise its children
        are expanded in quadrant order. The candidates' masses always sum to
        this node's mass.
        """
        if self.is_leaf():
            return [self]

        distance = self.centre_of_mass.distance_to(reference)
        if distance > 0 and self.region.side_length / distance < theta:
            return [self]

        candidates: List[QuadTreeNode] = []
        for child in self.children:
            if child is not None:
                candidates.extend(child.collect_candidates(reference, theta))
        return candidates

    def iter_nodes(self) -> Iterator[QuadTreeNode]:
        """Yield every node of this subtree, depth first in quadrant order."""
        yield self
        for child in self.children:
            if child is not None:
                yield from child.iter_nodes()

    def iter_leaves(self) -> Iterator[Body2D[Any]]:
        """Yield the original bodies stored in this subtree."""
        for node in self.iter_nodes():
            if node.is_leaf():
                yield node.centre_of_mass

    def leaf_count(self) -> int:
        return sum(1 for _ in self.iter_leaves())

    def height(self) -> int:
        """Number of levels below this node (0 for a leaf)."""
        return max(
            (child.height() + 1 for child in self.children if child is not None),
            default=0,
        )


def bounding_square(bodies: Sequence[Body2D[Any]]) -> Square:
    """
    Smallest square around the bodies, centred on their bounding box.

    The side is padded by a few ulps so rounding in the centre and the
    bounds never leaves an extreme body outside. The padded square must
    be representable, so the bodies' extent along each axis is limited to
    just under the largest float.

    Raises:
        EmptyBodiesError: If bodies is empty
        InvalidArgumentError: If the bodies span more than a float can hold
    """
    if not bodies:
        raise EmptyBodiesError("No bodies")

    min_x = min(b.x for b in bodies)
    max_x = max(b.x for b in bodies)
    min_y = min(b.y for b in bodies)
    max_y = max(b.y for b in bodies)

    len_x = max_x - min_x
    len_y = max_y - min_y
    pad = 8 * max(math.ulp(v) for v in (min_x, max_x, min_y, max_y))
    side = max(len_x, len_y) + pad
    half = side / 2

    center_x = min_x + len_x / 2
    center_y = min_y + len_y / 2
    bounds = (center_x - half, center_y - half, center_x + half, center_y + half)
    if not all(math.isfinite(v) for v in (side, *bounds)):
        raise InvalidArgumentError(
            f"Bodies span ({min_x}, {min_y}) to ({max_x}, {max_y}), "
            "an extent beyond the float range"
        )

    return Square(center_x, center_y, side, bounds=bounds)


__all__ = ["DEFAULT_MAX_DEPTH", "QuadTreeNode", "bounding_square"]
