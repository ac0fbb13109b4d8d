import json
from pathlib import Path

import pytest

from planar_lp.schemas import PlanarProblem


def load_example(name: str) -> PlanarProblem:
    data = json.loads(Path(__file__).parent.parent.joinpath("examples", name).read_text())
    return PlanarProblem.model_validate(data)


@pytest.fixture
def chairs_tables() -> PlanarProblem:
    return load_example("chairs_tables.json")
