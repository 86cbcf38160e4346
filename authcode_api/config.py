"""Configuration for environment variables and runtime knobs.

Provides a simple config object with server, CORS and logging settings.
Values are read once at import; a local `.env` file is honoured so the
rest of the codebase stays decoupled from direct env access.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Base
    APP_ENV = os.getenv("APP_ENV", "dev")
    API_HOST = os.getenv("API_HOST", "127.0.0.1")
    API_PORT = int(os.getenv("API_PORT", "5000"))

    # Routes are registered under this prefix, lowercased
    API_PREFIX = os.getenv("API_PREFIX", "/api/v1").lower()

    # Comma separated; "*" allows any origin
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = Config.LOG_LEVEL, fmt: str = Config.LOG_FORMAT) -> None:
    """Set up root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=fmt)
    root.setLevel(level)
