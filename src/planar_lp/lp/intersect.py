from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..constants import EPS
from ..schemas import BoundaryLine, Point

logger = logging.getLogger(__name__)


def intersect_lines(first: BoundaryLine, second: BoundaryLine, eps: float = EPS) -> Optional[Point]:
    """
    Solve the 2x2 system
      a1 x + b1 y = c1
      a2 x + b2 y = c2
    by Cramer's rule. Returns None for parallel or coincident lines and for
    results that are not finite.
    """

    a1, b1, c1 = first.a, first.b, first.c
    a2, b2, c2 = second.a, second.b, second.c
    det = a1 * b2 - a2 * b1
    if abs(det) < eps:
        return None
    x = (c1 * b2 - c2 * b1) / det
    y = (a1 * c2 - a2 * c1) / det
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return Point(x=x, y=y)


def generate_candidates(lines: Sequence[BoundaryLine], eps: float = EPS) -> List[Point]:
    """
    Intersect every unordered pair of boundary lines.

    Pairs are visited as (i, j) with i ascending and j > i ascending. The
    optimum tie-break depends on this order, so it must not change.
    """

    candidates: List[Point] = []
    skipped = 0
    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            point = intersect_lines(lines[i], lines[j], eps)
            if point is None:
                skipped += 1
                continue
            candidates.append(point)
    if skipped:
        logger.debug("Skipped %d degenerate line pairs out of %d lines", skipped, len(lines))
    return candidates
