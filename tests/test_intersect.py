import pytest

from planar_lp.lp.intersect import generate_candidates, intersect_lines
from planar_lp.schemas import BoundaryLine, Point


def test_intersect_lines_solves_system():
    point = intersect_lines(BoundaryLine(a=1.0, b=2.0, c=120.0), BoundaryLine(a=1.0, b=1.0, c=90.0))

    assert point is not None
    assert point.x == pytest.approx(60.0)
    assert point.y == pytest.approx(30.0)


def test_parallel_lines_have_no_intersection():
    assert intersect_lines(BoundaryLine(a=1.0, b=1.0, c=10.0), BoundaryLine(a=1.0, b=1.0, c=5.0)) is None


def test_coincident_lines_have_no_intersection():
    assert intersect_lines(BoundaryLine(a=1.0, b=1.0, c=5.0), BoundaryLine(a=2.0, b=2.0, c=10.0)) is None


def test_nearly_parallel_below_eps_is_degenerate():
    first = BoundaryLine(a=1.0, b=1.0, c=1.0)
    second = BoundaryLine(a=1.0, b=1.0 + 1e-8, c=2.0)
    assert intersect_lines(first, second) is None


def test_non_finite_result_is_rejected():
    huge = BoundaryLine(a=1.0, b=0.0, c=1e308)
    steep = BoundaryLine(a=1.0, b=1e-6, c=-1e308)
    # y overflows to -inf
    assert intersect_lines(huge, steep) is None


def test_generate_candidates_pair_order():
    lines = [
        BoundaryLine(a=1.0, b=0.0, c=1.0),  # x = 1
        BoundaryLine(a=0.0, b=1.0, c=2.0),  # y = 2
        BoundaryLine(a=1.0, b=1.0, c=4.0),  # x + y = 4
    ]

    candidates = generate_candidates(lines)

    assert [(round(p.x, 9), round(p.y, 9)) for p in candidates] == [(1.0, 2.0), (1.0, 3.0), (2.0, 2.0)]


def test_generate_candidates_skips_degenerate_pairs():
    lines = [
        BoundaryLine(a=1.0, b=1.0, c=10.0),
        BoundaryLine(a=1.0, b=1.0, c=5.0),
    ]
    assert generate_candidates(lines) == []


def test_generate_candidates_small_inputs():
    assert generate_candidates([]) == []
    assert generate_candidates([BoundaryLine(a=1.0, b=0.0, c=0.0)]) == []
    assert isinstance(
        generate_candidates([BoundaryLine(a=1.0, b=0.0, c=0.0), BoundaryLine(a=0.0, b=1.0, c=0.0)])[0],
        Point,
    )
