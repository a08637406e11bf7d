"""Core types and utilities for polyshrink.

This module provides type definitions, exceptions, and the low-level
geometric helpers used throughout the library.
"""

from .types import GeometryType

from .errors import (
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
    # Enums
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
