"""User profile endpoints."""

from fastapi import APIRouter, HTTPException, status

from swimlog import get_logger
from swimlog.api.dependencies import UserDAODep
from swimlog.models import UserProfile, UserProfileUpdate

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
def create_profile(data: UserProfile, dao: UserDAODep) -> UserProfile:
    """Create the profile row for a newly signed-up user."""
    if dao.get_profile(data.id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Profile already exists",
        )

    try:
        profile = dao.create_profile(data)
    except Exception as e:
        logger.error("profile_create_error", user_id=data.id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create profile: {e}",
        ) from e

    logger.info("profile_created", user_id=profile.id, role=profile.role.value)
    return profile


@router.get("/{user_id}", response_model=UserProfile)
def get_profile(user_id: str, dao: UserDAODep) -> UserProfile:
    profile = dao.get_profile(user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.patch("/{user_id}", response_model=UserProfile)
def update_profile(user_id: str, data: UserProfileUpdate, dao: UserDAODep) -> UserProfile:
    """Partial update - name, role, or avatar."""
    profile = dao.update_profile(user_id, data)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

    logger.info(
        "profile_updated",
        user_id=user_id,
        updated_fields=list(data.model_dump(exclude_unset=True).keys()),
    )
    return profile
