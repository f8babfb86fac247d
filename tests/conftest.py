from __future__ import annotations

import pytest

from blog import create_app
from blog.config import GatewaySettings


@pytest.fixture
def settings(tmp_path):
    return GatewaySettings(local_database_uri=f"sqlite:///{tmp_path / 'blog.db'}")


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
