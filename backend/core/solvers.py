"""Closed-form solvers for the compound interest equation A = P(1 + r/n)^(nT).

Rates enter and leave as percentages; every other quantity is used as given.
Each public solver returns a :class:`~backend.models.Result` and never raises
for bad input: failures are reported through ``Result.error``.
"""

from __future__ import annotations

import logging
import math
from functools import wraps
from typing import Callable, Dict, Mapping, Tuple

from backend.core.errors import (
    DomainViolation,
    InvalidInput,
    NumericDomainError,
    SolverError,
    UnsupportedOperation,
)
from backend.models import Result, Target

logger = logging.getLogger(__name__)

FREQUENCY_ADVISORY = (
    "Solving for Compounding Frequency (n) directly is mathematically complex "
    "and not supported by this calculator. Consider testing different 'n' "
    "values by solving for 'A'."
)


def _recovering(solver: Callable[..., float]) -> Callable[..., Result]:
    """Turn a solver that raises :class:`SolverError` into one returning Result."""

    @wraps(solver)
    def wrapper(*args: float) -> Result:
        try:
            return Result.of(solver(*args))
        except UnsupportedOperation as exc:
            return Result.advisory(str(exc), kind=exc.kind)
        except SolverError as exc:
            logger.debug("%s failed with %s: %s", solver.__name__, exc.kind, exc)
            return Result.failure(exc)

    return wrapper


def _growth_factor(rate_pct: float, years: float, frequency: float) -> float:
    try:
        return (1 + rate_pct / 100 / frequency) ** (frequency * years)
    except OverflowError as exc:
        raise NumericDomainError("Growth factor is too large to represent. Check input values.") from exc


def _ensure_finite(value: float, what: str) -> float:
    if math.isnan(value) or math.isinf(value):
        raise NumericDomainError(f"Could not calculate a valid {what}. Check input values.")
    return value


@_recovering
def solve_for_amount(principal: float, rate: float, years: float, frequency: float) -> float:
    if principal <= 0 or rate < 0 or years <= 0 or frequency <= 0:
        raise InvalidInput("Principal, Rate, Time, and Frequency must be positive. Rate can be zero.")
    return _ensure_finite(principal * _growth_factor(rate, years, frequency), "amount")


@_recovering
def solve_for_principal(amount: float, rate: float, years: float, frequency: float) -> float:
    """Discount ``amount``; a growth factor too large for a float is a NumericDomainError, not 0."""
    if amount <= 0 or rate < 0 or years <= 0 or frequency <= 0:
        raise InvalidInput("Amount, Rate, Time, and Frequency must be positive. Rate can be zero.")
    return _ensure_finite(amount / _growth_factor(rate, years, frequency), "principal")


@_recovering
def solve_for_rate(amount: float, principal: float, years: float, frequency: float) -> float:
    if amount <= 0 or principal <= 0 or years <= 0 or frequency <= 0:
        raise InvalidInput("Amount, Principal, Time, and Frequency must be positive.")
    if amount < principal:
        raise DomainViolation(
            "Final Amount (A) cannot be less than Principal (P) when calculating rate."
        )

    base = amount / principal
    exponent = 1 / (frequency * years)
    try:
        term = base**exponent
    except OverflowError as exc:
        raise NumericDomainError("Could not calculate a valid rate. Check input values.") from exc

    rate = frequency * (term - 1)
    return _ensure_finite(rate * 100, "rate")


@_recovering
def solve_for_time(amount: float, principal: float, rate: float, frequency: float) -> float:
    if amount <= 0 or principal <= 0 or rate < 0 or frequency <= 0:
        raise InvalidInput("Amount, Principal, Rate, and Frequency must be positive for time calculation.")
    if rate == 0:
        # T is undefined without growth: A never moves away from P.
        if amount > principal:
            raise DomainViolation("Rate must be greater than 0 for Amount to grow.")
        if amount < principal:
            raise DomainViolation("Final Amount (A) cannot be less than Principal (P): no growth path at zero rate.")
        raise DomainViolation("Time is undefined when Rate is zero.")
    if amount < principal:
        raise DomainViolation("Final Amount (A) cannot be less than Principal (P) if rate is positive.")
    if amount == principal:
        return 0.0

    ratio = amount / principal
    per_period = 1 + rate / 100 / frequency
    if ratio <= 0:
        raise NumericDomainError("Cannot calculate time with non-positive A/P ratio.")
    if per_period <= 0:
        raise NumericDomainError("Cannot calculate time due to log of non-positive value in denominator.")

    denominator = frequency * math.log(per_period)
    if denominator == 0:
        raise NumericDomainError(
            "Cannot calculate time. Possible division by zero (check rate and frequency)."
        )
    return _ensure_finite(math.log(ratio) / denominator, "time")


@_recovering
def solve_for_frequency(amount: float, principal: float, rate: float, years: float) -> float:
    # (A/P)^(1/T) = (1 + r/n)^n has no closed form in n.
    raise UnsupportedOperation(FREQUENCY_ADVISORY)


Solver = Callable[..., Result]

SOLVERS: Dict[Target, Tuple[Solver, Tuple[Target, ...]]] = {
    Target.AMOUNT: (
        solve_for_amount,
        (Target.PRINCIPAL, Target.RATE, Target.TIME, Target.FREQUENCY),
    ),
    Target.PRINCIPAL: (
        solve_for_principal,
        (Target.AMOUNT, Target.RATE, Target.TIME, Target.FREQUENCY),
    ),
    Target.RATE: (
        solve_for_rate,
        (Target.AMOUNT, Target.PRINCIPAL, Target.TIME, Target.FREQUENCY),
    ),
    Target.TIME: (
        solve_for_time,
        (Target.AMOUNT, Target.PRINCIPAL, Target.RATE, Target.FREQUENCY),
    ),
    Target.FREQUENCY: (
        solve_for_frequency,
        (Target.AMOUNT, Target.PRINCIPAL, Target.RATE, Target.TIME),
    ),
}


def solve(target: Target, values: Mapping[Target, float]) -> Result:
    """Dispatch to the solver for ``target`` using the four known ``values``."""
    solver, params = SOLVERS[target]
    missing = [param.value for param in params if values.get(param) is None]
    if missing:
        return Result.failure(InvalidInput(f"Missing value for: {', '.join(missing)}."))
    return solver(*(values[param] for param in params))
