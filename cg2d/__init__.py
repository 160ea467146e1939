"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: Quickhull на площині (явний стек замість рекурсії) + відновлення обходу оболонки.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, InvalidInputError, centroid, unique_points
from cg2d.predicates import Side, orient2d, signed_distance_to_line, side_of
from cg2d.line import Line
from cg2d.hull import ConvexHull2D, convex_hull, farthest, find_hull_points, partition
from cg2d.pipeline import convex_hull_2d

__all__ = [
    "Pt", "InvalidInputError", "centroid", "unique_points",
    "Side", "orient2d", "signed_distance_to_line", "side_of",
    "Line",
    "ConvexHull2D", "convex_hull", "farthest", "find_hull_points", "partition",
    "convex_hull_2d", "__version__",
]
