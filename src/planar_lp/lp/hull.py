from __future__ import annotations

from typing import List, Sequence

from ..constants import EPS
from ..schemas import Point


def cross(o: Point, a: Point, b: Point) -> float:
    """Cross product of segments oa and ob; positive for a left turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _chain(points: Sequence[Point], eps: float) -> List[Point]:
    chain: List[Point] = []
    for p in points:
        while len(chain) >= 2 and cross(chain[-2], chain[-1], p) <= eps:
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(points: Sequence[Point], eps: float = EPS) -> List[Point]:
    """
    Andrew's monotone chain.

    Returns the hull counter-clockwise starting from the lowest-x point, with
    no repeated endpoint. Collinear and near-collinear points (cross <= eps)
    are dropped. Fewer than two points give an empty hull.
    """

    if len(points) < 2:
        return []

    pts = sorted((Point(x=p.x, y=p.y) for p in points), key=lambda p: (p.x, p.y))
    lower = _chain(pts, eps)
    upper = _chain(list(reversed(pts)), eps)
    return lower[:-1] + upper[:-1]
