import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

import polyshrink
from plot_geometry import plot_comparison

# Noisy star; aggressive simplification folds its spikes over each other
angles = np.linspace(0, 2 * np.pi, 120, endpoint=False)
rng = np.random.default_rng(7)
radii = 10 + 4 * np.sin(7 * angles) + rng.normal(0, 0.4, angles.size)
ring = [[float(r * np.cos(a)), float(r * np.sin(a))] for r, a in zip(radii, angles)]

star = {'type': 'Polygon', 'coordinates': [ring]}

for fix in (False, True):
    for max_vertices in (60, 20, 10):
        result = polyshrink.simplify_polygon(
            star, max_vertices=max_vertices, min_vertices=0, fix_intersections=fix
        )
        print(f"max_vertices={max_vertices} fix_intersections={fix}: "
              f"{polyshrink.count_vertices(result)} vertices")
        plot_comparison(
            star, result,
            title=f"max_vertices={max_vertices}, fix_intersections={fix}",
        )
