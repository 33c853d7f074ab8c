"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
import math
from http import HTTPStatus
from typing import Any, Dict, List

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from investcalc import __version__
from investcalc.config import Settings
from investcalc.core.breakdown import build_breakdown
from investcalc.core.formatting import format_result
from investcalc.core.projection import ProjectionResult, project
from investcalc.schemas.health import HealthResponse
from investcalc.schemas.projection import (
    FormattedValues,
    ProjectionRequest,
    ProjectionResponse,
    ResultValues,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class NonFiniteResultError(ValueError):
    """Raised when valid inputs still drive the projection to NaN or infinity."""

    def __init__(self, fields: List[str]):
        super().__init__(f"projection is not finite for: {', '.join(fields)}")
        self.fields = fields


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _ensure_finite(result: ProjectionResult) -> None:
    bad = [name for name, value in result.model_dump().items() if not math.isfinite(value)]
    if bad:
        raise NonFiniteResultError(bad)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected projection input: %d error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(NonFiniteResultError)
def _handle_non_finite(exc: NonFiniteResultError):
    logger.warning("%s", exc)
    return jsonify({"detail": str(exc), "fields": exc.fields}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/projection/defaults")
def projection_defaults() -> Any:
    """Form values the calculator starts with."""
    return jsonify(ProjectionRequest().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Run the projection and return raw values, display strings and chart data."""
    settings = _settings()
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(
        raw_payload, context={"max_years": settings.max_years}
    )

    result = project(payload.to_input())
    _ensure_finite(result)
    logger.info(
        "projected %s years: future value %.2f", payload.years, result.future_value
    )

    response = ProjectionResponse(
        inputs=payload,
        result=ResultValues.from_result(result),
        formatted=FormattedValues.from_formatted(
            format_result(
                result,
                prefix=settings.currency_symbol,
                decimal_scale=settings.decimal_scale,
            )
        ),
        chart=build_breakdown(result, label=settings.currency_symbol),
    )
    return jsonify(response.model_dump())
