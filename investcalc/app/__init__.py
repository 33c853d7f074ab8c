"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.config import Settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info(
        "calculator API ready (origins: %s)", ", ".join(settings.cors_origins)
    )
    return app
