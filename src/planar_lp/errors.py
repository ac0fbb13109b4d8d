from __future__ import annotations


class ProblemValidationError(ValueError):
    """Raised before any geometry runs when the problem input is unusable."""


class InvalidObjective(ProblemValidationError):
    def __init__(self, message: str = "Objective coefficients are incomplete or not finite.") -> None:
        super().__init__(message)


class InvalidConstraint(ProblemValidationError):
    def __init__(self, index: int, name: str | None = None) -> None:
        self.index = index
        self.name = name
        label = name or f"#{index + 1}"
        super().__init__(f"Constraint {label} is incomplete or has non-finite values.")
