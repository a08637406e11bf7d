"""Type definitions for polyshrink operations."""

from enum import Enum

from .errors import InvalidArgumentError


class GeometryType(Enum):
    """Geometry types accepted by the simplifier.

    Attributes:
        POLYGON: Single outer ring with optional holes
        MULTIPOLYGON: Collection of polygons

    Examples:
        >>> GeometryType.parse('MultiPolygon')
        <GeometryType.MULTIPOLYGON: 'MultiPolygon'>
    """
    POLYGON = 'Polygon'
    MULTIPOLYGON = 'MultiPolygon'

    @classmethod
    def parse(cls, value) -> 'GeometryType':
        """Convert a type string (or GeometryType) into a GeometryType."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"type '{value}' not supported") from None


__all__ = [
    'GeometryType',
]
