"""Docs routes: GET /docs and GET /openapi.yaml

Development-only. ``/openapi.yaml`` serves the document packaged next to
the app module; ``/docs`` is a Swagger UI page pointed at it.
"""

from __future__ import annotations

from flask import Blueprint, Response, current_app, render_template_string, url_for


docs_bp = Blueprint("docs", __name__)

OPENAPI_RESOURCE = "openapi.yaml"
SWAGGER_UI_CDN = "https://unpkg.com/swagger-ui-dist@5"

SWAGGER_PAGE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{{ title }}</title>
    <link rel="stylesheet" href="{{ cdn }}/swagger-ui.css" />
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="{{ cdn }}/swagger-ui-bundle.js"></script>
    <script>
      SwaggerUIBundle({ url: {{ spec_url|tojson }}, dom_id: "#swagger-ui" });
    </script>
  </body>
</html>"""


@docs_bp.get("/openapi.yaml")
def openapi_yaml() -> Response:
    # Flask(__name__) roots the app at the package directory
    with current_app.open_resource(OPENAPI_RESOURCE) as f:
        return Response(f.read(), mimetype="text/yaml")


@docs_bp.get("/docs")
def swagger_ui() -> str:
    return render_template_string(
        SWAGGER_PAGE,
        title="Enum Vs String Request Parameter Demo",
        cdn=SWAGGER_UI_CDN,
        spec_url=url_for("docs.openapi_yaml"),
    )
