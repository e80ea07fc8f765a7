"""
gravity-model: Gravity-weighted random sampling in Python.

Draws a body at random with probability proportional to the gravitational
force (mass / distance², G factored out) it exerts on a reference point.

Available samplers:
- BarnesHutSampler: Quadtree approximation for planar bodies
- ExactSampler: Brute-force baseline for any body type
"""

__version__ = "0.1.0"

# Diagnostics
from .metrics import (
    empirical_frequencies,
    exact_probabilities,
    gravity_weights,
    total_variation_distance,
)

# Samplers
from .sampling import (
    BarnesHutSampler,
    ExactSampler,
    GravitySampler,
    choose_index_by_weight,
    cumulative_sum,
)

# Spatial data structures
from .spatial import Quadrant, QuadTreeNode, Square, bounding_square

# Body types
from .types import (
    EARTH_RADIUS_KM,
    Body,
    Body1D,
    Body2D,
    Body3D,
    GISBody,
    gravity_force,
)

# Validation
from .validation import (
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
)

__all__ = [
    # Version
    "__version__",
    # Body types
    "Body",
    "Body1D",
    "Body2D",
    "Body3D",
    "GISBody",
    "EARTH_RADIUS_KM",
    "gravity_force",
    # Samplers
    "GravitySampler",
    "BarnesHutSampler",
    "ExactSampler",
    "choose_index_by_weight",
    "cumulative_sum",
    # Spatial
    "Quadrant",
    "Square",
    "QuadTreeNode",
    "bounding_square",
    # Metrics
    "gravity_weights",
    "exact_probabilities",
    "empirical_frequencies",
    "total_variation_distance",
    # Errors
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
]
