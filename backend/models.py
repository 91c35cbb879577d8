from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, model_validator


class Target(str, Enum):
    """Variables of A = P(1 + r/n)^(nT), in the order the form validates them."""

    PRINCIPAL = "principal"
    RATE = "rate"
    TIME = "time"
    FREQUENCY = "frequency"
    AMOUNT = "amount"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Target.PRINCIPAL: "P",
    Target.RATE: "R",
    Target.TIME: "T",
    Target.FREQUENCY: "n",
    Target.AMOUNT: "A",
}

# Raw field value as submitted: a JSON number or a string. Booleans are rejected.
RawValue = Optional[Union[StrictFloat, StrictInt, StrictStr]]


class Result(BaseModel):
    """Outcome of a single solver call.

    Exactly one of ``value``, ``message`` (advisory) or ``error`` is set.
    ``kind`` names the error class for errors and advisories.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: Optional[float] = None
    message: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[str] = None

    @model_validator(mode="after")
    def ensure_single_outcome(self) -> "Result":
        present = [
            name
            for name in ("value", "message", "error")
            if getattr(self, name) is not None
        ]
        if len(present) != 1:
            raise ValueError("result must carry exactly one of value, message or error")
        if self.value is not None and self.kind is not None:
            raise ValueError("numeric results carry no kind")
        return self

    @classmethod
    def of(cls, value: float) -> "Result":
        return cls(value=value)

    @classmethod
    def advisory(cls, message: str, kind: Optional[str] = None) -> "Result":
        return cls(message=message, kind=kind)

    @classmethod
    def failure(cls, exc: Exception) -> "Result":
        return cls(error=str(exc), kind=getattr(exc, "kind", type(exc).__name__))

    @property
    def ok(self) -> bool:
        return self.error is None
