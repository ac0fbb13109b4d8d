#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from planar_lp.schemas import Constraint, Objective, PlanarProblem


def generate_random_problem(num_constraints: int, seed: Optional[int] = None) -> PlanarProblem:
    """Random bounded problem: positive-coefficient <= rows plus x, y >= 0."""
    rng = random.Random(seed)
    constraints: List[Constraint] = []
    for j in range(num_constraints):
        constraints.append(
            Constraint(
                a=rng.uniform(0.5, 5.0),
                b=rng.uniform(0.5, 5.0),
                sign="<=",
                c=rng.uniform(10.0, 60.0),
                name=f"c{j + 1}",
            )
        )
    return PlanarProblem(
        name="random-planar",
        sense=rng.choice(["max", "min"]),
        objective=Objective(a=rng.uniform(1.0, 4.0), b=rng.uniform(1.0, 4.0)),
        constraints=constraints,
        nonneg_x=True,
        nonneg_y=True,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible two-variable LP instances.")
    parser.add_argument("--constraints", type=int, default=4, help="Number of constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_problem(args.constraints, (args.seed or 0) + idx)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
