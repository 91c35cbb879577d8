"""Health-check payload."""

from backend import __version__
from backend.models import Target
from backend.schemas.health import HealthResponse


def get_health(service: str) -> HealthResponse:
    """Report the service as up, with the fields it can solve for."""
    return HealthResponse(
        status="ok",
        service=service,
        version=__version__,
        targets=list(Target),
    )
