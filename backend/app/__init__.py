"""Application factory and app-wide configuration."""

#setup: pip install -e ".[test]"
#setup: flask --app "backend.app:create_app()" run --port 5000 --debug

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.core.config import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["SIP_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origin_list}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info("SIP backend ready (env=%s)", settings.app_env)
    return app
