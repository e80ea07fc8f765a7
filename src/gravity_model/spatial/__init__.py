"""
Spatial data structures for Barnes-Hut sampling.

Provides square regions and the centre-of-mass quadtree.
"""

from .quadtree import DEFAULT_MAX_DEPTH, QuadTreeNode, bounding_square
from .region import Quadrant, Square

__all__ = ["DEFAULT_MAX_DEPTH", "Quadrant", "QuadTreeNode", "Square", "bounding_square"]
