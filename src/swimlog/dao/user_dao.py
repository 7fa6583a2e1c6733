"""Data Access Object for user profiles."""

from supabase import Client

from swimlog.dao.base import BaseDAO
from swimlog.models.user import UserProfile, UserProfileUpdate


class UserDAO(BaseDAO[UserProfile]):
    """DAO for the users table."""

    table_name = "users"
    model_class = UserProfile

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def create_profile(self, profile: UserProfile) -> UserProfile:
        return self.create(profile)

    def get_profile(self, user_id: str) -> UserProfile | None:
        return self.get_by_id(user_id)

    def update_profile(self, user_id: str, updates: UserProfileUpdate) -> UserProfile | None:
        """Write only the fields set on ``updates``."""
        return self.partial_update(user_id, updates.model_dump(mode="json", exclude_unset=True))
