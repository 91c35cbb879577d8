"""Pydantic schema for the health endpoint."""

from typing import List

from pydantic import BaseModel

from backend.models import Target


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    targets: List[Target]
