"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from yieldcalc.app.api.routes import api_bp
from yieldcalc.config import YieldCalcConfig, get_config
from yieldcalc.logging_config import setup_logging


def create_app(config: Optional[YieldCalcConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or get_config()
    setup_logging(level=config.log_level, log_format=config.log_format)

    app = Flask(__name__)
    app.config["YIELDCALC"] = config

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
