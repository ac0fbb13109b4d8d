from __future__ import annotations

from typing import List, Sequence

from ..constants import DEDUP_TOL
from ..schemas import EvaluatedPoint, Objective, Point, Sense


def evaluate_points(points: Sequence[Point], objective: Objective) -> List[EvaluatedPoint]:
    return [
        EvaluatedPoint(x=p.x, y=p.y, z=objective.a * p.x + objective.b * p.y)
        for p in points
    ]


def sort_by_objective(points: Sequence[EvaluatedPoint]) -> List[EvaluatedPoint]:
    # sorted() is stable: equal z keeps candidate generation order
    return sorted(points, key=lambda p: p.z)


def select_optimum(points: Sequence[EvaluatedPoint], sense: Sense) -> EvaluatedPoint:
    """
    Pick the extremum of an evaluated feasible set.

    Ties go to the earliest generated vertex for ``min`` and the latest for
    ``max``. Raises ValueError on an empty set; the caller reports that case
    as an infeasible region before getting here.
    """

    if not points:
        raise ValueError("Cannot select an optimum from an empty vertex set.")
    ordered = sort_by_objective(points)
    return ordered[-1] if sense == "max" else ordered[0]


def _same_vertex(p: Point, q: Point, tol: float) -> bool:
    return abs(p.x - q.x) <= tol and abs(p.y - q.y) <= tol


def dedupe_vertices(points: Sequence[EvaluatedPoint], tol: float = DEDUP_TOL) -> List[EvaluatedPoint]:
    unique: List[EvaluatedPoint] = []
    for p in points:
        if not any(_same_vertex(p, q, tol) for q in unique):
            unique.append(p)
    return unique
