"""
2-D nearest concept lookup for the drag demo.
"""

import math
from typing import Iterable

from ..core.types import NearestPoint, Point2D
from .vector_math import euclidean_distance

# a drop matches when round(5 * distance) < 15, i.e. distance < 2.9
DEFAULT_MATCH_DISTANCE = 2.9


def point_distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points."""
    return euclidean_distance((a.x, a.y), (b.x, b.y))


def nearest_point(
    query: Point2D,
    points: Iterable[Point2D],
    match_distance: float = DEFAULT_MATCH_DISTANCE,
) -> NearestPoint:
    """
    Find the closest concept point to a dragged query point.
    
    The first point wins ties. ``is_match`` is set when the distance is
    strictly below ``match_distance``.
    """
    best = None
    min_dist = math.inf
    for p in points:
        d = point_distance(query, p)
        if d < min_dist:
            min_dist = d
            best = p
    return NearestPoint(point=best, distance=min_dist, is_match=min_dist < match_distance)
