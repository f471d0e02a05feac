from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="userhub-tests-")

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'userhub-test.db')}"
os.environ["JWT_SECRET"] = "test-jwt-secret-with-at-least-32-bytes!"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "userhub-test.log")
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from userhub.app import create_app  # noqa: E402
from userhub.container import Container  # noqa: E402
from userhub.infrastructure.db import ENGINE, Base  # noqa: E402


@pytest.fixture()
def reset_database():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def container(reset_database) -> Container:
    return Container()


@pytest.fixture()
def app(container: Container) -> Flask:
    flask_app = create_app(container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
