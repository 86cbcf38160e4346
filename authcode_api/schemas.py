"""Request/response schemas for the authorization code endpoint.

Holds Pydantic models for the inbound payload and the success and
problem responses. The two categorical request fields are modelled
differently on purpose:

- ``identifier_type`` is a plain string checked against ``IDENTIFIER_TYPES``.
- ``delivery_mode`` is an enum decoded from (and emitted as) its member name.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


IDENTIFIER_TYPES = ("USERID", "EMAILADDRESS", "PHONENUMBER")

RESPONSE_MESSAGE = "Authorization code sent successfully"

VALIDATION_TITLE = "One or more validations failed."

PROBLEM_TYPES: Dict[int, str] = {
    400: "https://tools.ietf.org/html/rfc7231#section-6.5.1",
    404: "https://tools.ietf.org/html/rfc7231#section-6.5.4",
    405: "https://tools.ietf.org/html/rfc7231#section-6.5.5",
    415: "https://tools.ietf.org/html/rfc7231#section-6.5.13",
    500: "https://tools.ietf.org/html/rfc7231#section-6.6.1",
}


class AuthorizationCodeDeliveryMode(str, Enum):
    SMS = "SMS"
    EMAIL = "EMAIL"
    VOICE = "VOICE"

    @classmethod
    def from_name(cls, value: Any) -> "AuthorizationCodeDeliveryMode":
        """Decode a member from its wire name.

        Names match case-insensitively, ASCII spellings only. Ordinals and
        any other non-string input are rejected rather than coerced.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError("delivery mode must be given by name")
        if not value.isascii():
            raise ValueError(f"unknown delivery mode {value!r}")
        member = cls.__members__.get(value.strip().upper())
        if member is None:
            raise ValueError(f"unknown delivery mode {value!r}")
        return member


class SendAuthorizationCodeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    user_identifier: Optional[str] = ""
    identifier_type: Optional[str] = ""
    # None means "absent"; it never passes validation
    delivery_mode: Optional[AuthorizationCodeDeliveryMode] = None

    @field_validator("delivery_mode", mode="before")
    @classmethod
    def _decode_delivery_mode(cls, value: Any) -> Optional[AuthorizationCodeDeliveryMode]:
        if value is None:
            return None
        return AuthorizationCodeDeliveryMode.from_name(value)


class SendAuthorizationCodeResponse(BaseModel):
    user_identifier: str
    response_message: str = RESPONSE_MESSAGE


class ProblemDetails(BaseModel):
    """RFC 7807 style error body."""

    type: str
    title: str
    status: int
    detail: Optional[str] = None

    @classmethod
    def for_status(cls, status: int, title: str, detail: Optional[str] = None) -> "ProblemDetails":
        return cls(
            type=PROBLEM_TYPES.get(status, PROBLEM_TYPES[500]),
            title=title,
            status=status,
            detail=detail,
        )


class ValidationProblemDetails(ProblemDetails):
    type: str = PROBLEM_TYPES[400]
    title: str = VALIDATION_TITLE
    status: int = 400
    errors: Dict[str, List[str]] = {}
