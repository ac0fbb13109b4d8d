"""Planar LP: graphical-method solver for two-variable linear programs."""

from .errors import InvalidConstraint, InvalidObjective, ProblemValidationError
from .lp import (
    analyze_infeasibility,
    convex_hull,
    cross_check_with_highs,
    parse_planar_problem,
    solve_planar,
    validate_problem,
)
from .schemas import (
    Constraint,
    EvaluatedPoint,
    Objective,
    PlanarProblem,
    PlanarSolution,
    Point,
    SolveOptions,
)

__all__ = [
    "Constraint",
    "EvaluatedPoint",
    "InvalidConstraint",
    "InvalidObjective",
    "Objective",
    "PlanarProblem",
    "PlanarSolution",
    "Point",
    "ProblemValidationError",
    "SolveOptions",
    "analyze_infeasibility",
    "convex_hull",
    "cross_check_with_highs",
    "parse_planar_problem",
    "solve_planar",
    "validate_problem",
]
