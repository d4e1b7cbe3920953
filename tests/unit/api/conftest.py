"""
Name: API Test Fixtures

Responsibilities:
  - TestClient over the real application (in-memory container adapters)
  - Authenticated user + bearer headers
"""

import pytest
from fastapi.testclient import TestClient

from workdesk import container
from workdesk.api.main import app
from workdesk.identity.auth_users import create_access_token


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def users():
    return container.get_user_repository()


@pytest.fixture
def me(users, make_user):
    return make_user(users, email="asha@example.com")


@pytest.fixture
def auth_headers(me):
    token, _ = create_access_token(me)
    return {"Authorization": f"Bearer {token}"}
