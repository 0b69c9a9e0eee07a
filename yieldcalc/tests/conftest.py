from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from yieldcalc.app import create_app
from yieldcalc.config import YieldCalcConfig


@pytest.fixture()
def app() -> Flask:
    config = YieldCalcConfig(log_level="WARNING", log_format="text", max_projection_days=400)
    flask_app = create_app(config)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
