"""Validation rules for SendAuthorizationCode requests.

Rules are plain ``(field, predicate, message)`` triples evaluated in
order. Every rule runs; a failing rule never short-circuits the rest.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from authcode_api.schemas import (
    IDENTIFIER_TYPES,
    AuthorizationCodeDeliveryMode,
    SendAuthorizationCodeRequest,
)


USER_IDENTIFIER_REQUIRED = "User identifier is required."
IDENTIFIER_TYPE_REQUIRED = "Identifier type is required."
IDENTIFIER_TYPE_INVALID = "Identifier type must be USERID, EMAILADDRESS or PHONENUMBER"
DELIVERY_MODE_INVALID = "Delivery mode must be a valid value."

MESSAGE_SEPARATOR = " | "


class Violation(NamedTuple):
    field: str
    message: str


class ValidationFailure(Exception):
    """Request rejected; ``errors`` maps field name to its messages."""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(", ".join(errors) or "validation failed")
        self.errors = errors


def _is_blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


Rule = Tuple[str, Callable[[SendAuthorizationCodeRequest], bool], str]

RULES: List[Rule] = [
    ("user_identifier", lambda r: _is_blank(r.user_identifier), USER_IDENTIFIER_REQUIRED),
    ("identifier_type", lambda r: _is_blank(r.identifier_type), IDENTIFIER_TYPE_REQUIRED),
    ("identifier_type", lambda r: r.identifier_type not in IDENTIFIER_TYPES, IDENTIFIER_TYPE_INVALID),
    (
        "delivery_mode",
        lambda r: not isinstance(r.delivery_mode, AuthorizationCodeDeliveryMode),
        DELIVERY_MODE_INVALID,
    ),
]


def validate_request(req: SendAuthorizationCodeRequest) -> List[Violation]:
    return [Violation(field, message) for field, failed, message in RULES if failed(req)]


def group_violations(violations: Iterable[Violation]) -> Dict[str, List[str]]:
    """Group messages by field, joining repeats with ``" | "``.

    Each field maps to a single-element list; field order is the order in
    which fields first failed.
    """
    joined: Dict[str, str] = {}
    for field, message in violations:
        if field in joined:
            joined[field] += MESSAGE_SEPARATOR + message
        else:
            joined[field] = message
    return {field: [message] for field, message in joined.items()}
