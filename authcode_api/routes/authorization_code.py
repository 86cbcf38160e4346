"""Authorization code route: POST /authorizationcode/send

Registered under the configured API prefix (``/api/v1`` by default).

Request JSON: { user_identifier, identifier_type, delivery_mode }
Response JSON: { user_identifier, response_message }
Errors: 400 application/problem+json with per-field ``errors``.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from authcode_api.schemas import ProblemDetails, ValidationProblemDetails
from authcode_api.services.authorization_code_service import AuthorizationCodeService
from authcode_api.services.validation_service import ValidationFailure


authorization_code_bp = Blueprint("authorization_code", __name__)

PROBLEM_MIMETYPE = "application/problem+json"


def _problem(problem: ProblemDetails):
    resp = jsonify(problem.model_dump(mode="json", exclude_none=True))
    resp.status_code = problem.status
    resp.mimetype = PROBLEM_MIMETYPE
    return resp


@authorization_code_bp.route("/authorizationcode/send", methods=["POST"])
def send_authorization_code():
    payload: Any = request.get_json(silent=True)
    svc = AuthorizationCodeService()
    try:
        out = svc.send(payload)
    except ValidationFailure as failure:
        return _problem(ValidationProblemDetails(errors=failure.errors))
    return jsonify(out.model_dump(mode="json")), 200
