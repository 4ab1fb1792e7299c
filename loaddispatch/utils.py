# load-dispatch/loaddispatch/utils.py
"""
Geometry utilities for the greedy load dispatcher.

Locations are plain (x, y) pairs on a flat plane, so distances are Euclidean.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .errors import EmptyCandidateSet
from .models import Point


def euclidean_distance(a: Point, b: Point) -> float:
    """
    Calculate the straight-line distance between two points.

    Args:
        a: (x, y) of point 1
        b: (x, y) of point 2

    Returns:
        Distance between the two points (same unit as the coordinates)

    Example:
        >>> euclidean_distance((0.0, 0.0), (3.0, 4.0))
        5.0
    """
    return math.hypot(b[0] - a[0], b[1] - a[1])


def nearest_neighbor(query: Point, candidates: Iterable[Point]) -> Point:
    """
    Find the candidate closest to query.

    Single linear pass; the candidates are read but never reordered. When
    several candidates are equally close the first one wins, so callers
    control the tie-break through the order they pass candidates in.

    Args:
        query: Point to measure from
        candidates: Points to choose from

    Returns:
        The closest candidate

    Raises:
        EmptyCandidateSet: If candidates is empty
    """
    best: Optional[Point] = None
    best_dist = math.inf
    for candidate in candidates:
        dist = euclidean_distance(query, candidate)
        if best is None or dist < best_dist:
            best = candidate
            best_dist = dist

    if best is None:
        raise EmptyCandidateSet(f"No candidates to compare with {query}")
    return best
