"""Polyshrink - Area-preserving polygon simplification.

This library simplifies Polygon and MultiPolygon geometries by repeatedly
removing the vertex that forms the smallest triangle with its neighbours,
within vertex count and area change bounds, and can repair self-intersections
introduced along the way.
"""


# Simplification functions
from .simplify import (
    simplify_polygon,
    simplify_geometry,
    reduce_vertices,
    count_vertices,
    create_geometry,
)

# Simplification engine
from .simplifier import Simplifier, SimplificationHistory

# Topology repair
from .topology import fix_self_intersections

# Configuration
from .config import SimplifyConfig

# Core types (enums)
from .core import GeometryType

# Core exceptions
from .core import (
    PolyshrinkError,
    InvalidArgumentError,
    InvalidStateError,
    ExhaustedError,
    MinimumRingSizeError,
    HistoryEmptyError,
    InvalidRestoreOrderError,
    NoIntersectionFoundError,
    SimplificationWarning,
    RepairWarning,
)

__all__ = [

    # Simplification
    'simplify_polygon',
    'simplify_geometry',
    'reduce_vertices',
    'count_vertices',
    'create_geometry',

    # Engine
    'Simplifier',
    'SimplificationHistory',

    # Topology
    'fix_self_intersections',

    # Configuration
    'SimplifyConfig',

    # Types
    'GeometryType',

    # Exceptions
    'PolyshrinkError',
    'InvalidArgumentError',
    'InvalidStateError',
    'ExhaustedError',
    'MinimumRingSizeError',
    'HistoryEmptyError',
    'InvalidRestoreOrderError',
    'NoIntersectionFoundError',
    'SimplificationWarning',
    'RepairWarning',
]
