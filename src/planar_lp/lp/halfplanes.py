from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from ..constants import FEASIBILITY_TOL
from ..schemas import BoundaryLine, Constraint, HalfPlane, Point


def to_half_planes(constraint: Constraint) -> List[HalfPlane]:
    """Rewrite ``a*x + b*y <sign> c`` as one or two ``<=`` half-planes."""

    a, b, c = constraint.a, constraint.b, constraint.c
    if constraint.sign == "<=":
        return [HalfPlane(a=a, b=b, c=c)]
    if constraint.sign == ">=":
        return [HalfPlane(a=-a, b=-b, c=-c)]
    # equality -> both sides
    return [HalfPlane(a=a, b=b, c=c), HalfPlane(a=-a, b=-b, c=-c)]


def boundary_line(constraint: Constraint) -> BoundaryLine:
    return BoundaryLine(a=constraint.a, b=constraint.b, c=constraint.c)


def normalize_constraints(constraints: Iterable[Constraint]) -> List[HalfPlane]:
    half_planes: List[HalfPlane] = []
    for cons in constraints:
        half_planes.extend(to_half_planes(cons))
    return half_planes


def satisfies(point: Point, half_planes: Sequence[HalfPlane], tol: float = FEASIBILITY_TOL) -> bool:
    return all(hp.a * point.x + hp.b * point.y <= hp.c + tol for hp in half_planes)


def filter_feasible(
    points: Sequence[Point],
    half_planes: Sequence[HalfPlane],
    tol: float = FEASIBILITY_TOL,
) -> List[Point]:
    """Keep the points that lie inside every half-plane, in input order."""

    if not points:
        return []
    if not half_planes:
        return list(points)

    H = np.array([[hp.a, hp.b] for hp in half_planes], dtype=float)
    rhs = np.array([hp.c for hp in half_planes], dtype=float)
    P = np.array([[p.x, p.y] for p in points], dtype=float)

    lhs = P @ H.T
    mask = np.all(lhs <= rhs + tol, axis=1)
    return [point for point, keep in zip(points, mask) if keep]
