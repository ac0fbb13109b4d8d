import re
from typing import Dict, List, Set, Tuple

from ..schemas import Constraint, Objective, PlanarProblem

_TOKEN_SPLIT = re.compile(r",|;|\band\b", re.IGNORECASE)
_COMPARATOR = re.compile(r"(<=|>=|==|=)")
_MULTI_BOUND = re.compile(r"\b([xy](?:\s*,\s*[xy])+)\s*(<=|>=)\s*(-?\d+(?:\.\d+)?)")
_TERM_PATTERN = re.compile(r"([+-]?\s*\d*\.?\d*)\s*([A-Za-z_][\w]*)")
_NUMBER_PATTERN = re.compile(r"[+-]?\s*\d+(?:\.\d+)?")

_VARIABLES = ("x", "y")


def parse_planar_problem(spec: str) -> PlanarProblem:
    """
    Small rule-based parser for two-variable specs like:
      "maximize 50x + 80y subject to x + 2y <= 120, x + y <= 90, x,y >= 0"
    Bounds of the form ``x >= 0`` (or ``x,y >= 0``) switch on the
    non-negativity flags instead of adding constraint rows.
    """

    if not spec or not spec.strip():
        raise ValueError("Specification is empty.")

    normalized = " ".join(spec.replace("\n", " ").split())
    pieces = re.split(r"subject to|such that|s\.t\.", normalized, flags=re.IGNORECASE)
    objective_part = pieces[0].strip()
    constraints_part = pieces[1].strip() if len(pieces) > 1 else ""

    match = re.match(r"(maximize|minimize|max|min)\s*(.*)", objective_part, flags=re.IGNORECASE)
    if not match:
        raise ValueError("Objective must start with 'maximize' or 'minimize'.")
    sense = "max" if match.group(1).lower().startswith("max") else "min"
    objective_expr_str = match.group(2).strip()
    if not objective_expr_str:
        raise ValueError("Objective expression is missing.")

    obj_coeffs, _ = _parse_linear_expr(objective_expr_str)
    objective = Objective(a=obj_coeffs.get("x", 0.0), b=obj_coeffs.get("y", 0.0))

    # "x,y >= 0" -> "x >= 0; y >= 0" so the comma split below keeps each bound whole
    constraints_part = _MULTI_BOUND.sub(_expand_multi_bound, constraints_part)
    if constraints_part:
        tokens = [tok.strip() for tok in _TOKEN_SPLIT.split(constraints_part) if tok.strip()]
    else:
        tokens = []

    constraints: List[Constraint] = []
    nonneg: Set[str] = set()

    for token in tokens:
        comp_match = _COMPARATOR.search(token)
        if not comp_match:
            raise ValueError(f"Could not parse constraint segment '{token}'.")
        cmp = comp_match.group(1)
        lhs_str = token[: comp_match.start()].strip()
        rhs_str = token[comp_match.end() :].strip()
        if not lhs_str or not rhs_str:
            raise ValueError(f"Incomplete constraint expression '{token}'.")
        coeffs, constant = _parse_linear_expr(lhs_str)
        try:
            rhs_value = float(rhs_str.replace(" ", ""))
        except ValueError as exc:
            raise ValueError(f"Right-hand side '{rhs_str}' is not numeric.") from exc
        sign = "=" if cmp in ("=", "==") else cmp

        if _is_nonneg_bound(coeffs, constant, sign, rhs_value):
            nonneg.update(coeffs)
            continue

        constraints.append(
            Constraint(
                a=coeffs.get("x", 0.0),
                b=coeffs.get("y", 0.0),
                sign=sign,
                c=rhs_value - constant,
                name=f"c{len(constraints) + 1}",
            )
        )

    return PlanarProblem(
        name="parsed",
        sense=sense,
        objective=objective,
        constraints=constraints,
        nonneg_x="x" in nonneg,
        nonneg_y="y" in nonneg,
    )


def _expand_multi_bound(match: "re.Match[str]") -> str:
    vars_chunk, cmp, rhs_text = match.groups()
    names = [v.strip() for v in vars_chunk.split(",") if v.strip()]
    return "; ".join(f"{name} {cmp} {rhs_text}" for name in names)


def _is_nonneg_bound(coeffs: Dict[str, float], constant: float, sign: str, rhs: float) -> bool:
    if sign != ">=" or rhs != 0.0 or constant != 0.0 or len(coeffs) != 1:
        return False
    (coef,) = coeffs.values()
    return coef == 1.0


def _parse_linear_expr(expr_str: str) -> Tuple[Dict[str, float], float]:
    expr_clean = expr_str.replace("*", "")
    coeffs: Dict[str, float] = {}
    spans: List[Tuple[int, int]] = []

    for match in _TERM_PATTERN.finditer(expr_clean):
        coef_text = match.group(1).replace(" ", "")
        var_name = match.group(2)
        if var_name not in _VARIABLES:
            raise ValueError(f"Unknown variable '{var_name}'; only x and y are supported.")
        if coef_text in ("", "+"):
            coef = 1.0
        elif coef_text == "-":
            coef = -1.0
        else:
            coef = float(coef_text)
        coeffs[var_name] = coeffs.get(var_name, 0.0) + coef
        spans.append(match.span())

    remaining = list(expr_clean)
    for start, end in spans:
        for idx in range(start, end):
            remaining[idx] = " "
    remaining_str = "".join(remaining)

    constant = 0.0
    for num_match in _NUMBER_PATTERN.finditer(remaining_str):
        text = num_match.group(0).replace(" ", "")
        if text:
            constant += float(text)

    return {name: coef for name, coef in coeffs.items() if abs(coef) > 1e-12}, constant
