"""Error taxonomy shared by the solvers and the form controller."""

from __future__ import annotations


class SolverError(ValueError):
    """Base class for every user-correctable calculation failure."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidInput(SolverError):
    """A value is missing, non-numeric or outside its sign/positivity range."""


class FieldValidationError(InvalidInput):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    @property
    def kind(self) -> str:
        return InvalidInput.__name__


class DomainViolation(SolverError):
    """Values are valid one by one but cannot be combined for this target."""


class NumericDomainError(SolverError):
    """The closed-form expression is undefined or not finite."""


class UnsupportedOperation(SolverError):
    """The requested variable has no closed-form solution."""
