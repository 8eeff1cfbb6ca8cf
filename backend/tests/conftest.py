from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.core.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(app_env="test", log_level="warning"))
    with flask_app.test_client() as test_client:
        yield test_client
