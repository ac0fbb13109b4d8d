"""Two-variable linear programming by vertex enumeration."""

from .graphical import solve_planar, validate_problem
from .hull import convex_hull
from .parser import parse_planar_problem
from .diagnostics import analyze_infeasibility, cross_check_with_highs

__all__ = [
    "solve_planar",
    "validate_problem",
    "convex_hull",
    "parse_planar_problem",
    "analyze_infeasibility",
    "cross_check_with_highs",
]
