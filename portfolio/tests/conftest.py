from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

import pytest

# configuration is read once on first import, so the environment is fixed here
_TMP_DIR = tempfile.mkdtemp(prefix="portfolio-tests-")
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'portfolio.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["JWT_SECRET"] = "test-jwt-secret-with-enough-entropy"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["RESILIENCE_RETRIES"] = "0"
os.environ["RESILIENCE_BACKOFF_BASE"] = "0.1"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["METRICS_ENABLED"] = "true"


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from portfolio.infrastructure.db import drop_db, init_db

    drop_db()
    init_db()
    yield
    drop_db()


@pytest.fixture()
def container():
    from portfolio.infrastructure.container import Container

    return Container()


@pytest.fixture()
def app(reset_database, container):
    from portfolio.app import create_app

    return create_app(container)


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client
