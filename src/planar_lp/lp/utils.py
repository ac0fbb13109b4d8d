from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..constants import DISPLAY_DECIMALS, DISPLAY_SNAP, EPS
from ..schemas import Constraint, EvaluatedPoint, Point, Sense

Bounds = Tuple[float, float, float, float]


def round_display(value: float, decimals: int = DISPLAY_DECIMALS) -> float:
    """Round for humans; tiny magnitudes become exactly 0."""
    if abs(value) < DISPLAY_SNAP:
        return 0.0
    rounded = round(value, decimals)
    return 0.0 if rounded == 0 else rounded


def _fmt(value: float) -> str:
    text = f"{round_display(value):.{DISPLAY_DECIMALS}f}"
    return text.rstrip("0").rstrip(".")


def format_optimum(point: EvaluatedPoint, sense: Sense) -> str:
    label = "Maximum" if sense == "max" else "Minimum"
    return f"{label}: Z = {_fmt(point.z)} at (x={_fmt(point.x)}, y={_fmt(point.y)})"


def format_vertices(points: Sequence[EvaluatedPoint]) -> List[str]:
    return [f"({_fmt(p.x)}, {_fmt(p.y)})  Z = {_fmt(p.z)}" for p in points]


def plot_bounds(points: Sequence[Point], constraints: Sequence[Constraint], pad: float = 0.2) -> Bounds:
    """
    World window (min_x, max_x, min_y, max_y) framing a solution.

    The window always contains the origin and (1, 1). With no points, the
    axis intercepts of the constraint lines are used instead. Each axis is
    padded by ``pad`` times its span, or by 1 when the span is zero.
    """

    xs = [p.x for p in points]
    ys = [p.y for p in points]

    if not xs and not ys:
        for cons in constraints:
            # x = 0 -> b*y = c ; y = 0 -> a*x = c
            if abs(cons.b) > EPS:
                ys.append(cons.c / cons.b)
            if abs(cons.a) > EPS:
                xs.append(cons.c / cons.a)

    # overflowing intercepts of near-axis-parallel lines are left out
    xs = [v for v in xs if math.isfinite(v)]
    ys = [v for v in ys if math.isfinite(v)]

    min_x, max_x = min([0.0, *xs]), max([1.0, *xs])
    min_y, max_y = min([0.0, *ys]), max([1.0, *ys])

    pad_x = (max_x - min_x) * pad or 1.0
    pad_y = (max_y - min_y) * pad or 1.0
    return min_x - pad_x, max_x + pad_x, min_y - pad_y, max_y + pad_y
