"""Development entrypoint for running the Flask API locally.

Usage:
- flask --app authcode_api.main run --reload
- python -m authcode_api.main
"""

from __future__ import annotations

from authcode_api import create_app
from authcode_api.config import Config

app = create_app()

if __name__ == "__main__":
    # Simple built-in server for quick smoke testing
    app.run(host=Config.API_HOST, port=Config.API_PORT, debug=Config.APP_ENV == "dev")
