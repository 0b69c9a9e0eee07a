"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from yieldcalc.core.compound_interest import CompoundInterestInput, project_compound_interest
from yieldcalc.core.ping import get_ping_message, get_service_info
from yieldcalc.core.sofipo_interest import (
    SofipoCompoundInput,
    calculate_sofipo_compound_interest,
)
from yieldcalc.errors import InvalidArgumentError, InvalidArgumentReason
from yieldcalc.schemas.compound_interest import CompoundInterestResponse
from yieldcalc.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidArgumentError)
def _handle_invalid_argument(exc: InvalidArgumentError):
    logger.warning("Rejected calculation: %s", exc)
    return jsonify({"detail": str(exc), "reason": exc.reason.value}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), **get_service_info())
    return jsonify(response.model_dump())


def _check_days_limit(days: int) -> None:
    limit = current_app.config["YIELDCALC"].max_projection_days
    if days > limit:
        raise InvalidArgumentError(
            InvalidArgumentReason.DAYS_LIMIT, f"days must be <= {limit}"
        )


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Daily compounding series for a nominal annual rate."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CompoundInterestInput.model_validate(raw_payload)
    _check_days_limit(payload.days)

    points = project_compound_interest(payload)
    last = points[-1]
    logger.info("Projected %d days at annual rate %s", payload.days, payload.annualRate)

    response = CompoundInterestResponse(
        points=points,
        finalBalance=last.balance,
        interestEarned=last.interestEarned,
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/sofipo")
def sofipo() -> Any:
    """Two-tier SOFIPO gains for a deposit held ``days`` days."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = SofipoCompoundInput.model_validate(raw_payload)
    _check_days_limit(payload.days)

    result = calculate_sofipo_compound_interest(payload)
    logger.info("SOFIPO calculation over %d days, total gain %.2f", payload.days, result.gainTotal)
    return jsonify(result.model_dump())
