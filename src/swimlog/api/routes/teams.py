"""Team API endpoints.

Coaches create teams; swimmers join with the six-character team code.
"""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from swimlog import get_logger
from swimlog.api.dependencies import TeamDAODep
from swimlog.models import Team, TeamMember

logger = get_logger(__name__)

router = APIRouter(prefix="/teams", tags=["teams"])


class TeamCreate(BaseModel):
    """Request body for creating a team."""

    name: str
    coach_id: str
    description: str | None = None
    logo_url: str | None = None


class JoinRequest(BaseModel):
    """Request body for joining a team by code."""

    team_code: str
    user_id: str


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
def create_team(data: TeamCreate, dao: TeamDAODep) -> Team:
    """Create a team with a generated join code."""
    if not data.name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Team name is required")

    try:
        team = dao.create_team(
            name=data.name.strip(),
            coach_id=data.coach_id,
            description=data.description,
            logo_url=data.logo_url,
        )
    except Exception as e:
        logger.error("team_create_error", coach_id=data.coach_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create team: {e}",
        ) from e

    logger.info("team_created", team_id=team.id, coach_id=data.coach_id, team_code=team.team_code)
    return team


@router.get("", response_model=list[Team])
def list_teams(
    dao: TeamDAODep,
    coach_id: str | None = Query(None, description="Teams coached by this user"),
    user_id: str | None = Query(None, description="Teams this swimmer belongs to"),
) -> list[Team]:
    """List a coach's teams (with members) or a swimmer's teams."""
    if coach_id:
        return dao.find_by_coach(coach_id)
    if user_id:
        return dao.find_swimmer_teams(user_id)
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Either coach_id or user_id is required",
    )


@router.get("/code/{team_code}", response_model=Team)
def get_team_by_code(team_code: str, dao: TeamDAODep) -> Team:
    """Look up a team by join code."""
    team = dao.find_by_code(team_code)
    if not team:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    return team


@router.post("/join", response_model=TeamMember, status_code=status.HTTP_201_CREATED)
def join_team(data: JoinRequest, dao: TeamDAODep) -> TeamMember:
    """Join the team with ``team_code``."""
    team = dao.find_by_code(data.team_code)
    if not team:
        logger.warning("team_join_unknown_code", team_code=data.team_code, user_id=data.user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")

    try:
        member = dao.join_team(team.id, data.user_id)
    except Exception as e:
        error_str = str(e).lower()
        if "duplicate" in error_str or "unique" in error_str:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Already a member of '{team.name}'",
            ) from e
        logger.error("team_join_error", team_id=team.id, user_id=data.user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to join team: {e}",
        ) from e

    logger.info("team_joined", team_id=team.id, user_id=data.user_id)
    return member
