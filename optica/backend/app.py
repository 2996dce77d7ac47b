"""Flask application factory for the optica backend."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, Response, jsonify
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from werkzeug.exceptions import HTTPException

from optica.backend.routes.api import api_bp
from optica.common.settings import Settings, get_settings

JSON_LOG_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'


def log_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    level = log_level(settings.log_level)
    if settings.log_json:
        logging.basicConfig(level=level, format=JSON_LOG_FORMAT)
    else:
        logging.basicConfig(level=level)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def create_app() -> Flask:
    configure_logging()

    app = Flask(__name__)
    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        return jsonify({"error": exc.name, "description": exc.description}), exc.code

    @app.get("/metrics")
    def metrics():  # pragma: no cover - integration
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    return app


if __name__ == "__main__":  # pragma: no cover
    app = create_app()
    app.run(host="0.0.0.0", port=8000, debug=True)
