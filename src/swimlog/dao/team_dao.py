"""Data Access Object for teams and team memberships."""

from supabase import Client

from swimlog.dao.base import BaseDAO
from swimlog.models.team import MemberRef, Team, TeamMember, generate_team_code

SELECT_WITH_MEMBERS = (
    "*, team_members (id, user_id, joined_at, users (id, name, email, avatar_url))"
)


class TeamDAO(BaseDAO[Team]):
    """DAO for the teams table and its team_members relation."""

    table_name = "teams"
    model_class = Team
    members_table_name = "team_members"

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    @property
    def members_table(self):
        return self.client.table(self.members_table_name)

    def create_team(
        self,
        name: str,
        coach_id: str,
        description: str | None = None,
        logo_url: str | None = None,
    ) -> Team:
        """Create a team with a freshly generated join code."""
        team = Team(
            name=name,
            coach_id=coach_id,
            description=description,
            logo_url=logo_url,
            team_code=generate_team_code(),
        )
        return self.create(team)

    def find_by_coach(self, coach_id: str) -> list[Team]:
        """Teams coached by ``coach_id``, with members loaded."""
        result = self.table.select(SELECT_WITH_MEMBERS).eq("coach_id", coach_id).execute()
        return [self._to_model(row) for row in result.data]

    def find_by_code(self, team_code: str) -> Team | None:
        """Look up a team by its join code (case-insensitive)."""
        result = (
            self.table.select("*").eq("team_code", team_code.strip().upper()).limit(1).execute()
        )
        if not result.data:
            return None
        return self._to_model(result.data[0])

    def join_team(self, team_id: str, user_id: str) -> TeamMember:
        """Add ``user_id`` to a team."""
        result = self.members_table.insert({"team_id": team_id, "user_id": user_id}).execute()
        return TeamMember(**result.data[0])

    def find_swimmer_teams(self, user_id: str) -> list[Team]:
        """Teams ``user_id`` is a member of."""
        result = self.members_table.select("teams (*)").eq("user_id", user_id).execute()
        return [self._to_model(row["teams"]) for row in result.data if row.get("teams")]

    def _to_model(self, row: dict) -> Team:
        """Convert a team row (optionally with joined members) to a Team."""
        data = dict(row)
        members = []
        for m in data.pop("team_members", None) or []:
            user = m.get("users")
            members.append(
                TeamMember(
                    id=m.get("id"),
                    team_id=data.get("id"),
                    user_id=m["user_id"],
                    joined_at=m.get("joined_at"),
                    user=MemberRef(**user) if user else None,
                )
            )
        return Team(**data, members=members)

    def _to_db(self, model: Team) -> dict:
        """Team columns only; members live in their own table."""
        return model.model_dump(mode="json", exclude_none=True, exclude={"members"})
