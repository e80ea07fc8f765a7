"""
Gravity-weighted samplers.

- BarnesHutSampler: Quadtree approximation over planar bodies
- ExactSampler: Brute-force baseline over any body type
"""

from .barnes_hut import BarnesHutSampler
from .base import GravitySampler
from .exact import ExactSampler
from .weighted import choose_index_by_weight, cumulative_sum

__all__ = [
    "BarnesHutSampler",
    "ExactSampler",
    "GravitySampler",
    "choose_index_by_weight",
    "cumulative_sum",
]
