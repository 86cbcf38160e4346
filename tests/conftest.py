"""
Shared pytest fixtures for the authorization code API tests.
"""

from __future__ import annotations

import pytest

from authcode_api import create_app
from authcode_api.schemas import AuthorizationCodeDeliveryMode


def pytest_configure(config: pytest.Config) -> None:
    """Register project markers to prevent unknown marker warnings."""
    markers = {
        "unit": "Unit tests that should execute quickly.",
        "integration": "Tests going through the Flask app.",
    }
    for name, description in markers.items():
        config.addinivalue_line("markers", f"{name}: {description}")


@pytest.fixture
def app():
    return create_app({"TESTING": True, "APP_ENV": "dev"})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_payload():
    return {
        "user_identifier": "abc123",
        "identifier_type": "EMAILADDRESS",
        "delivery_mode": AuthorizationCodeDeliveryMode.SMS.value,
    }
