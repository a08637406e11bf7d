"""Simple geometry visualization helpers for debugging."""

import matplotlib.pyplot as plt
from shapely.geometry import MultiPolygon, Polygon, shape
from shapely.geometry.base import BaseGeometry


def plot_comparison(original, simplified, title: str = "Simplification", mode: str = 'side'):
    """Plot original and simplified geometries.

    Args:
        original: Original geometry (Shapely or interchange dict)
        simplified: Simplified geometry (Shapely or interchange dict)
        title: Plot title
        mode: 'side' for two panels, 'overlay' to draw both on one axes
    """
    original = _as_geometry(original)
    simplified = _as_geometry(simplified)

    if mode == 'overlay':
        fig, ax = plt.subplots(1, 1, figsize=(7, 6))
        _plot_geometry(ax, original, color='red', alpha=0.3)
        _plot_geometry(ax, simplified, color='blue', alpha=0.3, markers=True)
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)
    else:
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

        _plot_geometry(ax1, original, color='red', alpha=0.5, markers=True)
        ax1.set_title(f"Original ({_count(original)} vertices)")
        ax1.set_aspect('equal')
        ax1.grid(True, alpha=0.3)

        _plot_geometry(ax2, simplified, color='blue', alpha=0.5, markers=True)
        ax2.set_title(f"Simplified ({_count(simplified)} vertices)")
        ax2.set_aspect('equal')
        ax2.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _as_geometry(geom) -> BaseGeometry:
    if isinstance(geom, dict):
        return shape(geom)
    return geom


def _count(geom: BaseGeometry) -> int:
    polygons = geom.geoms if isinstance(geom, MultiPolygon) else [geom]
    return sum(
        len(ring.coords) - 1
        for poly in polygons
        for ring in [poly.exterior, *poly.interiors]
    )


def _plot_geometry(ax, geom: BaseGeometry, color='blue', alpha=0.5, markers=False):
    """Plot a polygon or multi-polygon on the given axes.

    Args:
        ax: Matplotlib axes
        geom: Geometry to plot
        color: Fill color
        alpha: Transparency
        markers: Draw a dot on every vertex
    """
    if isinstance(geom, Polygon):
        _plot_polygon(ax, geom, color=color, alpha=alpha, markers=markers)
    elif isinstance(geom, MultiPolygon):
        for poly in geom.geoms:
            _plot_polygon(ax, poly, color=color, alpha=alpha, markers=markers)
    else:
        raise TypeError(f"Cannot plot {geom.geom_type}")


def _plot_polygon(ax, poly: Polygon, color='blue', alpha=0.5, markers=False):
    """Plot a single polygon with holes.

    Args:
        ax: Matplotlib axes
        poly: Polygon to plot
        color: Fill color
        alpha: Transparency
        markers: Draw a dot on every vertex
    """
    x, y = poly.exterior.xy
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)
    if markers:
        ax.plot(x, y, 'o', color='black', markersize=3)

    # Holes drawn in white
    for interior in poly.interiors:
        x, y = interior.xy
        ax.fill(x, y, color='white', edgecolor='black', linewidth=1)
        if markers:
            ax.plot(x, y, 'o', color='black', markersize=3)
