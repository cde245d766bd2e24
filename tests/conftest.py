# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by the test modules. The app is built without running its
# lifespan, so no database is contacted; the fake pool is attached directly.
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from core.settings import Settings
from main import create_app
from tests.fakes import FakePool


@pytest.fixture
def settings():
    return Settings(db_host="db.test", db_database="users_test", db_user="tester", db_password="secret")


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
def app(settings, fake_pool):
    application = create_app(settings)
    application.state.pool = fake_pool
    return application


@pytest.fixture
def client(app):
    # Not used as a context manager: the lifespan (real pool) never starts.
    return TestClient(app)
