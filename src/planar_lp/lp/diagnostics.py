from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

import numpy as np
from scipy.optimize import linprog

from .graphical import solve_planar, validate_problem
from ..errors import ProblemValidationError
from ..schemas import PlanarProblem, SolveOptions

logger = logging.getLogger(__name__)


def analyze_infeasibility(problem: PlanarProblem) -> Dict[str, Any]:
    """Drop each user constraint in turn and re-solve; report the ones that matter."""

    options = SolveOptions(list_vertices=False)
    base = solve_planar(problem, options)
    if base.status == "invalid":
        return {
            "status": "error",
            "message": base.message,
            "conflicting_constraints": [],
            "suggestions": ["Fill in every coefficient with a finite number."],
        }
    if base.status != "infeasible":
        return {
            "status": base.status,
            "message": "Problem is not infeasible.",
            "conflicting_constraints": [],
            "suggestions": [],
        }

    conflicts: List[str] = []
    for idx, cons in enumerate(problem.constraints):
        trimmed = problem.constraints[:idx] + problem.constraints[idx + 1 :]
        relaxed = problem.model_copy(update={"constraints": trimmed})
        if solve_planar(relaxed, options).status != "infeasible":
            conflicts.append(cons.name or f"c{idx + 1}")

    suggestions = []
    if conflicts:
        suggestions.append("Relax or inspect the conflicting constraints above.")
    else:
        suggestions.append("Several constraints conflict together, or with x >= 0 / y >= 0.")

    return {
        "status": "infeasible",
        "message": "Feasible region is empty; listed constraints whose removal restores feasibility.",
        "conflicting_constraints": conflicts,
        "suggestions": suggestions,
    }


def cross_check_with_highs(problem: PlanarProblem) -> Dict[str, Any]:
    """
    Solve the same problem with SciPy's HiGHS backend.

    Unlike vertex enumeration this reports unbounded objectives, so it can be
    used to tell whether a vertex returned by solve_planar is a true optimum.
    """

    try:
        validate_problem(problem)
    except ProblemValidationError as exc:
        return {"status": "invalid", "objective_value": None, "x": None, "y": None, "message": str(exc)}

    A_ub, b_ub, A_eq, b_eq = _build_constraint_matrices(problem)
    bounds = [
        (0.0, None) if problem.nonneg_x else (None, None),
        (0.0, None) if problem.nonneg_y else (None, None),
    ]
    c = np.array([problem.objective.a, problem.objective.b], dtype=float)
    sense_factor = 1.0 if problem.sense == "min" else -1.0

    res = linprog(
        c * sense_factor,
        A_ub=A_ub if A_ub.size else None,
        b_ub=b_ub if b_ub.size else None,
        A_eq=A_eq if A_eq.size else None,
        b_eq=b_eq if b_eq.size else None,
        bounds=bounds,
        method="highs",
    )
    status = _map_status(res.status)
    logger.debug("%s: HiGHS status %s (%s)", problem.name, status, res.message)

    if status != "optimal":
        return {"status": status, "objective_value": None, "x": None, "y": None, "message": res.message}
    return {
        "status": "optimal",
        "objective_value": float(res.fun * sense_factor),
        "x": float(res.x[0]),
        "y": float(res.x[1]),
        "message": res.message,
    }


def _build_constraint_matrices(problem: PlanarProblem) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    A_ub: List[List[float]] = []
    b_ub: List[float] = []
    A_eq: List[List[float]] = []
    b_eq: List[float] = []

    for cons in problem.constraints:
        row = [cons.a, cons.b]
        if cons.sign == "<=":
            A_ub.append(row)
            b_ub.append(cons.c)
        elif cons.sign == ">=":
            A_ub.append([-value for value in row])
            b_ub.append(-cons.c)
        else:
            A_eq.append(row)
            b_eq.append(cons.c)

    return (
        np.array(A_ub, dtype=float) if A_ub else np.empty((0, 2)),
        np.array(b_ub, dtype=float) if b_ub else np.empty(0),
        np.array(A_eq, dtype=float) if A_eq else np.empty((0, 2)),
        np.array(b_eq, dtype=float) if b_eq else np.empty(0),
    )


def _map_status(code: int) -> str:
    mapping = {
        0: "optimal",
        1: "iteration_limit",
        2: "infeasible",
        3: "unbounded",
    }
    return mapping.get(code, "iteration_limit")
