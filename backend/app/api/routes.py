"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.export import export_filename, yearly_breakdown_to_csv
from backend.core.ping import build_ping_response
from backend.core.sip import calculate_sip, generate_yearly_breakdown
from backend.schemas.sip import SIPRequest, SIPResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected SIP parameters: %d error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


def _parse_request() -> SIPRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False) or {}
    return SIPRequest.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = build_ping_response(current_app.config["SIP_SETTINGS"])
    return jsonify(response.model_dump())


@api_bp.post("/sip/calculate")
def calculate() -> Any:
    """Summaries, yearly breakdown and chart series for one parameter set."""
    payload = _parse_request()
    result = calculate_sip(payload.to_parameters())
    logger.info(
        "SIP calculated: monthly=%s return=%s%% years=%s step_up=%s%% inflation=%s%%",
        payload.monthly_investment,
        payload.annual_return_percent,
        payload.years,
        payload.step_up_percent,
        payload.inflation_rate_percent,
    )
    response = SIPResponse.model_validate(result.model_dump())
    return jsonify(response.model_dump())


@api_bp.post("/sip/breakdown.csv")
def breakdown_csv() -> Any:
    """Yearly breakdown as a downloadable CSV file."""
    payload = _parse_request()
    records = generate_yearly_breakdown(
        payload.monthly_investment,
        payload.annual_return_percent,
        payload.years,
        payload.step_up_percent,
    )
    if not records:
        return "", HTTPStatus.NO_CONTENT

    filename = export_filename(payload.monthly_investment, payload.years)
    logger.info("Exporting %d breakdown rows as %s", len(records), filename)
    return Response(
        yearly_breakdown_to_csv(records),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
