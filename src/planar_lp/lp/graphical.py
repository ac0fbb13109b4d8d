from __future__ import annotations

import logging
import math
from typing import List, Optional

from .halfplanes import boundary_line, filter_feasible, normalize_constraints
from .hull import convex_hull
from .intersect import generate_candidates
from .utils import format_optimum
from .vertices import dedupe_vertices, evaluate_points, select_optimum, sort_by_objective
from ..errors import InvalidConstraint, InvalidObjective, ProblemValidationError
from ..schemas import Constraint, PlanarProblem, PlanarSolution, SolveOptions

logger = logging.getLogger(__name__)

NONNEG_X = Constraint(a=1.0, b=0.0, sign=">=", c=0.0, name="x>=0")
NONNEG_Y = Constraint(a=0.0, b=1.0, sign=">=", c=0.0, name="y>=0")


def _finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def validate_problem(problem: PlanarProblem) -> None:
    """Raise InvalidObjective / InvalidConstraint for missing or non-finite input."""

    if not (_finite(problem.objective.a) and _finite(problem.objective.b)):
        raise InvalidObjective()
    for idx, cons in enumerate(problem.constraints):
        if not (_finite(cons.a) and _finite(cons.b) and _finite(cons.c)):
            raise InvalidConstraint(idx, cons.name)


def collect_constraints(problem: PlanarProblem) -> List[Constraint]:
    """User constraints followed by the requested non-negativity rows."""

    constraints = list(problem.constraints)
    if problem.nonneg_x:
        constraints.append(NONNEG_X)
    if problem.nonneg_y:
        constraints.append(NONNEG_Y)
    return constraints


def solve_planar(problem: PlanarProblem, options: Optional[SolveOptions] = None) -> PlanarSolution:
    """
    Solve a two-variable LP by enumerating boundary-line intersections.

    Every pair of constraint boundaries is intersected, infeasible points are
    dropped and the objective is evaluated on what remains. Unbounded
    objectives are not detected: the best enumerated vertex is returned.
    """

    opts = options or SolveOptions()

    try:
        validate_problem(problem)
    except ProblemValidationError as exc:
        return PlanarSolution(status="invalid", message=str(exc))

    constraints = collect_constraints(problem)
    half_planes = normalize_constraints(constraints)
    lines = [boundary_line(cons) for cons in constraints]

    candidates = generate_candidates(lines, eps=opts.eps)
    feasible = filter_feasible(candidates, half_planes, tol=opts.feasibility_tol)
    logger.debug(
        "%s: %d constraints, %d candidates, %d feasible",
        problem.name,
        len(constraints),
        len(candidates),
        len(feasible),
    )

    if not feasible:
        logger.info("%s: feasible region is empty", problem.name)
        return PlanarSolution(
            status="infeasible",
            candidates=len(candidates),
            message="Feasible region is empty.",
        )

    evaluated = evaluate_points(feasible, problem.objective)
    optimum = select_optimum(evaluated, problem.sense)

    vertices = None
    if opts.list_vertices:
        # near-duplicates resolve to the lower-z copy
        unique = dedupe_vertices(sort_by_objective(evaluated), tol=opts.dedup_tol)
        vertices = sorted(unique, key=lambda p: p.z, reverse=True)

    hull = convex_hull(evaluated, eps=opts.eps)

    return PlanarSolution(
        status="optimal",
        optimum=optimum,
        vertices=vertices,
        hull=hull,
        candidates=len(candidates),
        message=format_optimum(optimum, problem.sense),
    )
