"""Exception hierarchy for polyshrink.

Every failure raised by the simplification engine derives from
:class:`PolyshrinkError`, so callers can catch the whole family at once or
handle a specific condition.
"""


class PolyshrinkError(Exception):
    """Base class for all polyshrink errors."""
    pass


class InvalidArgumentError(PolyshrinkError, ValueError):
    """Raised when an option is out of contract or a geometry type is unsupported.

    Examples:
        >>> simplify_polygon(geojson, max_vertices=2)
        Traceback (most recent call last):
        ...
        InvalidArgumentError: max_vertices must be at least 3
    """
    pass


class InvalidStateError(PolyshrinkError):
    """Raised when a vertex or ring is used in a state that does not allow it.

    Examples are reading the area of a vertex that is not linked into a ring,
    or removing a vertex that has already been removed.
    """
    pass


class ExhaustedError(PolyshrinkError):
    """Raised when simplify() or skip() finds no remaining candidate vertex."""
    pass


class MinimumRingSizeError(ExhaustedError):
    """Raised when the only remaining vertices belong to rings at minimum size."""
    pass


class HistoryEmptyError(PolyshrinkError):
    """Raised when undo() is called with no simplification to revert."""
    pass


class InvalidRestoreOrderError(PolyshrinkError):
    """Raised when a vertex is restored out of last-removed-first-restored order."""
    pass


class NoIntersectionFoundError(PolyshrinkError):
    """Raised when a rewind finds no removal that introduced an intersection."""
    pass


class SimplificationWarning(UserWarning):
    """Warning emitted when a requested vertex budget cannot be reached."""
    pass


class RepairWarning(SimplificationWarning):
    """Warning emitted when intersection repair stops before converging."""
    pass


__all__ = [
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
