"""Simplification settings."""

from dataclasses import dataclass
from typing import Dict, Optional

from .core.errors import InvalidArgumentError

DEFAULT_MAX_VERTICES = 200
DEFAULT_MIN_VERTICES = 30
DEFAULT_MAX_ERROR = 0.05


@dataclass
class SimplifyConfig:
    """Options controlling one simplification run.

    Attributes:
        max_vertices: Hard ceiling on the total vertex count (at least 3).
            Wins over both other bounds, including when it is lower than
            ``min_vertices``.
        min_vertices: Soft floor; simplification by error budget stops here.
        max_error: Largest allowed cumulative area change, as a fraction of
            the original area, in ``[0, 1]``.
        fix_intersections: Rewind, skip and merge to remove self-intersections
            introduced by simplification.
        max_repair_iterations: Optional cap on intersection repair rounds.

    Examples:
        >>> SimplifyConfig(max_vertices=50).validate()
        >>> SimplifyConfig(max_error=1.5).validate()
        Traceback (most recent call last):
        ...
        InvalidArgumentError: max_error must be between 0 and 1
    """

    max_vertices: int = DEFAULT_MAX_VERTICES
    min_vertices: int = DEFAULT_MIN_VERTICES
    max_error: float = DEFAULT_MAX_ERROR
    fix_intersections: bool = False
    max_repair_iterations: Optional[int] = None

    def validate(self) -> None:
        """Raise :class:`InvalidArgumentError` for out-of-contract options."""
        if self.max_vertices < 3:
            raise InvalidArgumentError('max_vertices must be at least 3')
        if self.min_vertices < 0:
            raise InvalidArgumentError('min_vertices must not be negative')
        if not 0 <= self.max_error <= 1:
            raise InvalidArgumentError('max_error must be between 0 and 1')
        if self.max_repair_iterations is not None and self.max_repair_iterations < 1:
            raise InvalidArgumentError('max_repair_iterations must be positive')

    def simplify_options(self) -> Dict[str, float]:
        """Keyword arguments for :meth:`Simplifier.simplify_to`."""
        return {
            'max_vertices': self.max_vertices,
            'min_vertices': self.min_vertices,
            'max_error': self.max_error,
        }


__all__ = [
    'DEFAULT_MAX_VERTICES',
    'DEFAULT_MIN_VERTICES',
    'DEFAULT_MAX_ERROR',
    'SimplifyConfig',
]
