#!/usr/bin/env python3
import json
import time
from pathlib import Path

from planar_lp.lp.graphical import solve_planar
from planar_lp.schemas import PlanarProblem, SolveOptions
from scripts.generate_instances import generate_random_problem


def load_example(name: str) -> PlanarProblem:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return PlanarProblem.model_validate(json.loads(path.read_text()))


def main() -> None:
    opts = SolveOptions()
    cases = [("examples/chairs_tables.json", load_example("chairs_tables.json"))]
    for seed, size in enumerate((5, 20, 80)):
        cases.append((f"random-{size}", generate_random_problem(size, seed)))

    print("name,status,objective,candidates,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        solution = solve_planar(problem, opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        objective = solution.optimum.z if solution.optimum else None
        print(f"{name},{solution.status},{objective},{solution.candidates},{elapsed_ms:.2f}")


if __name__ == "__main__":
    main()
