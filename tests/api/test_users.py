"""Tests for the user profile endpoints."""

import pytest

from swimlog.models import UserProfile, UserRole

USERS = "/api/v1/users"


@pytest.fixture
def coach() -> UserProfile:
    return UserProfile(id="c1", email="coach@example.com", name="Coach Kim", role=UserRole.COACH)


class TestProfiles:
    """Tests for profile create, read, and update."""

    def test_create(self, client, user_dao, coach):
        user_dao.get_profile.return_value = None
        user_dao.create_profile.return_value = coach

        response = client.post(
            USERS,
            json={"id": "c1", "email": "coach@example.com", "name": "Coach Kim", "role": "coach"},
        )

        assert response.status_code == 201
        assert response.json()["role"] == "coach"
        assert user_dao.create_profile.call_args.args[0].role == UserRole.COACH

    def test_create_existing(self, client, user_dao, coach):
        user_dao.get_profile.return_value = coach

        response = client.post(
            USERS, json={"id": "c1", "email": "coach@example.com", "name": "Coach Kim"}
        )

        assert response.status_code == 409
        user_dao.create_profile.assert_not_called()

    def test_create_invalid_email(self, client, user_dao):
        response = client.post(USERS, json={"id": "u1", "email": "nope", "name": "John Doe"})
        assert response.status_code == 422

    def test_get(self, client, user_dao, coach):
        user_dao.get_profile.return_value = coach

        response = client.get(f"{USERS}/c1")

        assert response.status_code == 200
        assert response.json()["name"] == "Coach Kim"

    def test_get_missing(self, client, user_dao):
        user_dao.get_profile.return_value = None
        assert client.get(f"{USERS}/missing").status_code == 404

    def test_update(self, client, user_dao, coach):
        user_dao.update_profile.return_value = coach.model_copy(update={"name": "Coach K"})

        response = client.patch(f"{USERS}/c1", json={"name": "Coach K"})

        assert response.status_code == 200
        assert response.json()["name"] == "Coach K"
        user_id, updates = user_dao.update_profile.call_args.args
        assert user_id == "c1"
        assert updates.model_dump(exclude_unset=True) == {"name": "Coach K"}

    def test_update_missing(self, client, user_dao):
        user_dao.update_profile.return_value = None
        assert client.patch(f"{USERS}/missing", json={"name": "x"}).status_code == 404
