from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.core.errors import FieldValidationError, InvalidInput
from backend.core.formatting import render_result
from backend.core.solvers import solve
from backend.models import RawValue, Result, Target

logger = logging.getLogger(__name__)


class FormState(BaseModel):
    """Which field is being solved for, and the raw values of the others."""

    model_config = ConfigDict(extra="forbid")

    active_target: Target = Target.AMOUNT
    values: Dict[Target, RawValue] = Field(default_factory=dict)

    @model_validator(mode="after")
    def clear_active_target(self) -> "FormState":
        self.values[self.active_target] = None
        return self

    @classmethod
    def from_form(
        cls, form: Mapping[str, str], default_target: Target = Target.AMOUNT
    ) -> "FormState":
        selection = form.get("solve_for") or default_target.value
        try:
            target = Target(selection)
        except ValueError as exc:
            raise InvalidInput("Invalid selection for 'solve for'.") from exc
        return cls(
            active_target=target,
            values={field: form.get(field.value) for field in Target},
        )

    def is_enabled(self, field: Target) -> bool:
        return field is not self.active_target


@dataclass
class Calculation:
    target: Target
    result: Result
    display: str
    invalid_field: Optional[str] = None

    @property
    def is_error(self) -> bool:
        result = self.result
        return result.error is not None or (result.message is None and result.value is None)


def select_target(state: FormState, target: Target) -> FormState:
    """Make ``target`` the unknown: clear its value, keep every other one."""
    return FormState(active_target=target, values=dict(state.values))


def parse_number(raw: RawValue) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        number = float(raw)
    else:
        text = raw.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def _positive(number: float) -> bool:
    return number > 0


def _non_negative(number: float) -> bool:
    return number >= 0


def _positive_integer(number: float) -> bool:
    return number > 0 and number.is_integer()


RULES: Dict[Target, tuple[Callable[[float], bool], str]] = {
    Target.PRINCIPAL: (_positive, "Principal (P) must be a positive number."),
    Target.RATE: (_non_negative, "Rate (R) must be a non-negative number."),
    Target.TIME: (_positive, "Time (T) must be a positive number."),
    Target.FREQUENCY: (
        _positive_integer,
        "Compounding Frequency (n) must be a positive integer.",
    ),
    Target.AMOUNT: (_positive, "Final Amount (A) must be a positive number."),
}


def validate(state: FormState) -> Dict[Target, float]:
    """Parse every supplied field, stopping at the first invalid one.

    Fields are checked in ``Target`` order; the active target is skipped.
    """
    parsed: Dict[Target, float] = {}
    for field in Target:
        if not state.is_enabled(field):
            continue
        check, message = RULES[field]
        number = parse_number(state.values.get(field))
        if number is None or not check(number):
            raise FieldValidationError(field.value, message)
        parsed[field] = int(number) if field is Target.FREQUENCY else number
    return parsed


def evaluate(state: FormState) -> Calculation:
    """Validate and solve; invalid fields raise :class:`FieldValidationError`."""
    values = validate(state)
    result = solve(state.active_target, values)
    logger.info(
        "solved for %s: %s",
        state.active_target.value,
        result.kind or "value",
        extra={"target": state.active_target.value},
    )
    return Calculation(
        target=state.active_target,
        result=result,
        display=render_result(state.active_target, result),
    )


def calculate(state: FormState) -> Calculation:
    """Like :func:`evaluate`, but a validation failure becomes an error outcome."""
    try:
        return evaluate(state)
    except FieldValidationError as exc:
        logger.info(
            "rejected %s: %s", exc.field, exc, extra={"target": state.active_target.value}
        )
        result = Result.failure(exc)
        return Calculation(
            target=state.active_target,
            result=result,
            display=render_result(state.active_target, result),
            invalid_field=exc.field,
        )
