import pytest

from app import create_app
from app.helpers.services import get_task_service
from common.app_config import TestConfig


@pytest.fixture
def app():
    """A fresh app, and therefore a fresh in-memory store, per test."""
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def task_service(app):
    with app.app_context():
        yield get_task_service()
