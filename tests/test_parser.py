import pytest

from planar_lp.lp.graphical import solve_planar
from planar_lp.lp.parser import parse_planar_problem


def test_parser_reads_textbook_problem():
    spec = "maximize 50x + 80y subject to x + 2y <= 120, x + y <= 90, x,y >= 0"
    problem = parse_planar_problem(spec)

    assert problem.sense == "max"
    assert (problem.objective.a, problem.objective.b) == (50.0, 80.0)
    assert [(c.a, c.b, c.sign, c.c) for c in problem.constraints] == [
        (1.0, 2.0, "<=", 120.0),
        (1.0, 1.0, "<=", 90.0),
    ]
    assert [c.name for c in problem.constraints] == ["c1", "c2"]
    assert problem.nonneg_x and problem.nonneg_y

    solution = solve_planar(problem)
    assert solution.optimum.z == pytest.approx(5400.0)


def test_parser_keeps_non_zero_bounds_as_rows():
    problem = parse_planar_problem("min 3x - y s.t. x >= 3; y <= 5 and x - y == 0; y >= 0")

    assert problem.sense == "min"
    assert (problem.objective.a, problem.objective.b) == (3.0, -1.0)
    assert [(c.a, c.b, c.sign, c.c) for c in problem.constraints] == [
        (1.0, 0.0, ">=", 3.0),
        (0.0, 1.0, "<=", 5.0),
        (1.0, -1.0, "=", 0.0),
    ]
    assert not problem.nonneg_x
    assert problem.nonneg_y


def test_parser_moves_lhs_constant_to_rhs():
    problem = parse_planar_problem("maximize x + y subject to 2x + y + 4 <= 10")
    assert problem.constraints[0].c == pytest.approx(6.0)


def test_parser_without_constraints():
    problem = parse_planar_problem("minimize 2x + 3y")
    assert problem.constraints == []
    assert not problem.nonneg_x and not problem.nonneg_y


@pytest.mark.parametrize(
    "spec",
    [
        "",
        "optimize x + y subject to x <= 1",
        "maximize",
        "maximize x + z subject to x <= 1",
        "maximize x + y subject to x + y",
        "maximize x + y subject to x + y <= ten",
    ],
)
def test_parser_rejects_malformed_specs(spec):
    with pytest.raises(ValueError):
        parse_planar_problem(spec)
