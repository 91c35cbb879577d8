"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.errors import FieldValidationError
from backend.core.health import get_health
from backend.domain.form import FormState, evaluate
from backend.schemas.solve import SolveRequest, SolveResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(FieldValidationError)
def _handle_field_error(exc: FieldValidationError):
    """Report the first invalid input field."""
    return jsonify({"detail": str(exc), "field": exc.field}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = get_health(current_app.config["SETTINGS"].app_name)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/solve")
def solve() -> Any:
    """Solve for one variable of the compound interest equation."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = SolveRequest.model_validate(raw_payload)
    state = FormState(active_target=payload.target, values=payload.values)
    calculation = evaluate(state)
    response = SolveResponse(
        target=calculation.target,
        result=calculation.result,
        display=calculation.display,
    )
    status = HTTPStatus.UNPROCESSABLE_ENTITY if calculation.is_error else HTTPStatus.OK
    return jsonify(response.model_dump(mode="json")), status
