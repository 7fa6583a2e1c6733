"""Fixtures for API tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from swimlog.api.app import create_app
from swimlog.api.dependencies import (
    get_settings_dep,
    get_team_dao,
    get_time_entry_dao,
    get_user_dao,
)
from swimlog.config import Settings
from swimlog.dao.team_dao import TeamDAO
from swimlog.dao.user_dao import UserDAO


@pytest.fixture
def team_dao() -> MagicMock:
    """Mock TeamDAO; tests set return values per call."""
    return MagicMock(spec=TeamDAO)


@pytest.fixture
def user_dao() -> MagicMock:
    """Mock UserDAO; tests set return values per call."""
    return MagicMock(spec=UserDAO)


@pytest.fixture
def client(store, team_dao, user_dao) -> TestClient:
    """Test client backed by the in-memory entry store and mocked team and user DAOs."""
    app = create_app()
    app.dependency_overrides[get_time_entry_dao] = lambda: store
    app.dependency_overrides[get_team_dao] = lambda: team_dao
    app.dependency_overrides[get_user_dao] = lambda: user_dao
    return TestClient(app)


@pytest.fixture
def client_without_database(monkeypatch) -> TestClient:
    """Test client with no Supabase credentials and no DAO overrides."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_KEY", raising=False)
    app = create_app()
    app.dependency_overrides[get_settings_dep] = lambda: Settings(_env_file=None)
    return TestClient(app)
