from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEDUP_TOL, EPS, FEASIBILITY_TOL

Sense = Literal["min", "max"]
Sign = Literal["<=", "=", ">="]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Constraint(_Frozen):
    """One user row ``a*x + b*y <sign> c``; missing coefficients are ``None``."""

    a: Optional[float] = None
    b: Optional[float] = None
    sign: Sign = "<="
    c: Optional[float] = None
    name: Optional[str] = None


class HalfPlane(_Frozen):
    a: float
    b: float
    c: float


class BoundaryLine(_Frozen):
    a: float
    b: float
    c: float


class Point(_Frozen):
    x: float
    y: float


class EvaluatedPoint(Point):
    z: float


class Objective(_Frozen):
    a: Optional[float] = None
    b: Optional[float] = None


class PlanarProblem(_Frozen):
    name: str = "problem"
    sense: Sense = "max"
    objective: Objective
    constraints: List[Constraint] = Field(default_factory=list)
    nonneg_x: bool = False
    nonneg_y: bool = False


class SolveOptions(BaseModel):
    eps: float = EPS
    feasibility_tol: float = FEASIBILITY_TOL
    dedup_tol: float = DEDUP_TOL
    list_vertices: bool = True


class PlanarSolution(BaseModel):
    status: Literal["optimal", "infeasible", "invalid"]
    optimum: Optional[EvaluatedPoint] = None
    vertices: List[EvaluatedPoint] | None = None
    hull: List[Point] | None = None
    candidates: int = 0
    message: str = ""
