"""AuthorizationCodeService: decode, validate and confirm a send request.

No code is actually delivered; the service only decides whether the
request would be accepted and shapes the confirmation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from authcode_api.schemas import SendAuthorizationCodeRequest, SendAuthorizationCodeResponse
from authcode_api.services.validation_service import (
    DELIVERY_MODE_INVALID,
    ValidationFailure,
    Violation,
    group_violations,
    validate_request,
)


REQUEST_BODY_REQUIRED = "A JSON object request body is required."


def _decode_violations(exc: ValidationError) -> List[Violation]:
    out: List[Violation] = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "request"
        message = DELIVERY_MODE_INVALID if field == "delivery_mode" else err["msg"]
        out.append(Violation(field, message))
    return out


def decode_request(payload: Any) -> SendAuthorizationCodeRequest:
    """Decode a JSON payload into a request model.

    A ``delivery_mode`` that is not a member name decodes to ``None`` so the
    validator reports it together with every other rule. Any other shape
    problem is a ValidationFailure on its own.
    """
    if not isinstance(payload, dict):
        raise ValidationFailure({"request": [REQUEST_BODY_REQUIRED]})
    try:
        return SendAuthorizationCodeRequest.model_validate(payload)
    except ValidationError as exc:
        violations = _decode_violations(exc)
        if any(v.field != "delivery_mode" for v in violations):
            raise ValidationFailure(group_violations(violations)) from exc
        logging.debug("Undecodable delivery_mode %r", payload.get("delivery_mode"))
        return SendAuthorizationCodeRequest.model_validate({**payload, "delivery_mode": None})


class AuthorizationCodeService:
    def send(self, payload: Any) -> SendAuthorizationCodeResponse:
        """Accept or reject a send request.

        Raises ValidationFailure with the grouped field errors when the
        payload is malformed or breaks any rule.
        """
        req = decode_request(payload)
        violations = validate_request(req)
        if violations:
            errors: Dict[str, List[str]] = group_violations(violations)
            logging.info(f"Rejected authorization code request: {', '.join(errors)}")
            raise ValidationFailure(errors)

        logging.info(
            f"Accepted authorization code request: type={req.identifier_type}, "
            f"mode={req.delivery_mode.value}"
        )
        return SendAuthorizationCodeResponse(user_identifier=req.user_identifier)
