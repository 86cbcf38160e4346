"""
End-to-end tests through the Flask test client.
"""
import pytest

from authcode_api import create_app


pytestmark = pytest.mark.integration

SEND_URL = "/api/v1/authorizationcode/send"


def test_send_success(client, valid_payload):
    resp = client.post(SEND_URL, json=valid_payload)
    assert resp.status_code == 200
    assert resp.get_json() == {
        "user_identifier": "abc123",
        "response_message": "Authorization code sent successfully",
    }


def test_send_all_fields_invalid(client):
    resp = client.post(
        SEND_URL,
        json={"user_identifier": "", "identifier_type": "", "delivery_mode": "CARRIER_PIGEON"},
    )
    assert resp.status_code == 400
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["status"] == 400
    assert body["title"] == "One or more validations failed."
    assert body["type"] == "https://tools.ietf.org/html/rfc7231#section-6.5.1"
    assert body["errors"] == {
        "user_identifier": ["User identifier is required."],
        "identifier_type": [
            "Identifier type is required. | "
            "Identifier type must be USERID, EMAILADDRESS or PHONENUMBER"
        ],
        "delivery_mode": ["Delivery mode must be a valid value."],
    }


def test_error_fields_keep_rule_order(client):
    resp = client.post(SEND_URL, json={"delivery_mode": 1})
    assert list(resp.get_json()["errors"]) == ["user_identifier", "identifier_type", "delivery_mode"]


@pytest.mark.parametrize(
    "payload",
    [
        {"user_identifier": "abc123", "identifier_type": "EMAILADDRESS", "delivery_mode": "SMS"},
        {"user_identifier": "", "identifier_type": "", "delivery_mode": "NOPE"},
    ],
)
def test_identical_requests_give_identical_bodies(client, payload):
    first = client.post(SEND_URL, json=payload)
    second = client.post(SEND_URL, json=payload)
    assert first.status_code == second.status_code
    assert first.data == second.data


def test_invalid_json_body(client):
    resp = client.post(SEND_URL, data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == {"request": ["A JSON object request body is required."]}


def test_lowercase_delivery_mode_is_accepted(client, valid_payload):
    resp = client.post(SEND_URL, json=dict(valid_payload, delivery_mode="voice"))
    assert resp.status_code == 200


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_unknown_route_is_problem_document(client):
    resp = client.get("/api/v1/nope")
    assert resp.status_code == 404
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["status"] == 404
    assert body["title"] == "Not Found"


def test_wrong_method_is_problem_document(client):
    resp = client.get(SEND_URL)
    assert resp.status_code == 405
    assert resp.get_json()["type"] == "https://tools.ietf.org/html/rfc7231#section-6.5.5"
    assert "POST" in resp.headers["Allow"]


def test_docs_available_in_dev(client):
    page = client.get("/docs")
    assert page.status_code == 200
    assert b"/openapi.yaml" in page.data
    resp = client.get("/openapi.yaml")
    assert resp.status_code == 200
    assert b"/api/v1/authorizationcode/send" in resp.data


def test_docs_hidden_outside_dev():
    client = create_app({"TESTING": True, "APP_ENV": "prod"}).test_client()
    assert client.get("/docs").status_code == 404


def test_custom_api_prefix(valid_payload):
    client = create_app({"TESTING": True, "API_PREFIX": "/api/v2"}).test_client()
    assert client.post("/api/v2/authorizationcode/send", json=valid_payload).status_code == 200


def test_non_ascii_delivery_mode_spelling_is_rejected(client, valid_payload):
    resp = client.post(SEND_URL, json=dict(valid_payload, delivery_mode="ſms"))
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == {"delivery_mode": ["Delivery mode must be a valid value."]}


def test_api_prefix_override_is_lowercased(valid_payload):
    client = create_app({"TESTING": True, "API_PREFIX": "/API/V2"}).test_client()
    assert client.post("/api/v2/authorizationcode/send", json=valid_payload).status_code == 200
