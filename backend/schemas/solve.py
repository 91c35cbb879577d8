"""Data contracts for the solve endpoint."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from backend.models import RawValue, Result, Target


class SolveRequest(BaseModel):
    """The unknown field and the values of the other four."""

    model_config = ConfigDict(extra="forbid")

    target: Target = Field(..., description="Field to solve for.")
    values: Dict[Target, RawValue] = Field(
        default_factory=dict,
        description="Known fields; rate is a percentage (e.g. 5 for 5%).",
    )


class SolveResponse(BaseModel):
    """Solver outcome plus the line the form would display."""

    target: Target
    result: Result
    display: str
