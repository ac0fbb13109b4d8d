import pytest

from planar_lp.lp.diagnostics import analyze_infeasibility, cross_check_with_highs
from planar_lp.schemas import Constraint, Objective, PlanarProblem


def make_conflict() -> PlanarProblem:
    return PlanarProblem(
        name="conflict",
        objective=Objective(a=1.0, b=1.0),
        constraints=[
            Constraint(a=1.0, b=0.0, sign=">=", c=5.0, name="lower"),
            Constraint(a=1.0, b=0.0, sign="<=", c=2.0, name="upper"),
            Constraint(a=0.0, b=1.0, sign="<=", c=8.0, name="cap"),
        ],
        nonneg_x=True,
        nonneg_y=True,
    )


def test_conflicting_constraints_are_listed():
    report = analyze_infeasibility(make_conflict())

    assert report["status"] == "infeasible"
    assert report["conflicting_constraints"] == ["lower", "upper"]
    assert report["suggestions"]


def test_feasible_problem_has_no_conflicts(chairs_tables):
    report = analyze_infeasibility(chairs_tables)

    assert report["status"] == "optimal"
    assert report["conflicting_constraints"] == []


def test_invalid_problem_reports_error():
    problem = PlanarProblem(objective=Objective(a=None, b=1.0))
    report = analyze_infeasibility(problem)
    assert report["status"] == "error"


def test_highs_agrees_on_textbook_problem(chairs_tables):
    result = cross_check_with_highs(chairs_tables)

    assert result["status"] == "optimal"
    assert result["objective_value"] == pytest.approx(5400.0, rel=1e-6)
    assert result["x"] == pytest.approx(60.0, rel=1e-6)
    assert result["y"] == pytest.approx(30.0, rel=1e-6)


def test_highs_handles_equality_rows():
    problem = PlanarProblem(
        sense="max",
        objective=Objective(a=1.0, b=0.0),
        constraints=[Constraint(a=1.0, b=1.0, sign="=", c=4.0)],
        nonneg_x=True,
        nonneg_y=True,
    )
    result = cross_check_with_highs(problem)

    assert result["status"] == "optimal"
    assert result["x"] == pytest.approx(4.0, abs=1e-6)


def test_highs_flags_unbounded_objective():
    problem = PlanarProblem(
        sense="max",
        objective=Objective(a=1.0, b=1.0),
        constraints=[Constraint(a=1.0, b=-1.0, sign="<=", c=1.0)],
        nonneg_x=True,
        nonneg_y=True,
    )
    result = cross_check_with_highs(problem)

    assert result["status"] != "optimal"
    assert result["objective_value"] is None


def test_highs_reports_infeasible():
    assert cross_check_with_highs(make_conflict())["status"] == "infeasible"


def test_highs_rejects_invalid_input():
    problem = PlanarProblem(
        objective=Objective(a=1.0, b=1.0),
        constraints=[Constraint(a=1.0, b=1.0, sign="<=")],
    )
    assert cross_check_with_highs(problem)["status"] == "invalid"
