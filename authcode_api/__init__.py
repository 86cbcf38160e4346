"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
set up logging, enable CORS, register route blueprints, and render HTTP
errors as problem documents.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from authcode_api.config import Config, configure_logging
from authcode_api.routes.authorization_code import PROBLEM_MIMETYPE, authorization_code_bp
from authcode_api.routes.docs import docs_bp
from authcode_api.schemas import ProblemDetails


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.config["API_PREFIX"] = app.config["API_PREFIX"].lower()
    configure_logging(app.config["LOG_LEVEL"])

    # Field order in responses is part of the contract
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=False,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Blueprints
    app.register_blueprint(authorization_code_bp, url_prefix=app.config["API_PREFIX"])
    if app.config["APP_ENV"] == "dev":
        app.register_blueprint(docs_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        problem = ProblemDetails.for_status(exc.code or 500, exc.name, exc.description)
        resp = exc.get_response()
        resp.data = app.json.dumps(problem.model_dump(mode="json", exclude_none=True))
        resp.mimetype = PROBLEM_MIMETYPE
        return resp

    return app
