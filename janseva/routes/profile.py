"""
API routes for the signed-in user's eligibility profile
"""
import logging
from fastapi import APIRouter, Depends, HTTPException

from ..auth import get_current_user_id
from ..models.profile import UserProfile
from ..services.profile_service import ProfileService, get_profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/me")
async def get_my_profile(
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service)
):
    """
    Get the signed-in user's profile and whether it is complete
    """
    try:
        profile = await profiles.get_profile(user_id)

        if profile is None:
            raise HTTPException(status_code=404, detail="Please complete your profile first")

        return {
            "user_id": user_id,
            "profile": profile.model_dump(by_alias=True, mode="json"),
            "is_complete": profile.is_complete(),
            "missing_fields": profile.missing_fields()
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching profile for {user_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve profile: {str(e)}")


@router.put("/me")
async def save_my_profile(
    profile: UserProfile,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service)
):
    """
    Create or replace the signed-in user's profile
    """
    try:
        saved = await profiles.save_profile(user_id, profile)

        return {
            "user_id": user_id,
            "profile": saved.model_dump(by_alias=True, mode="json"),
            "is_complete": saved.is_complete(),
            "missing_fields": saved.missing_fields()
        }

    except Exception as e:
        logger.error(f"Error saving profile for {user_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to save profile: {str(e)}")
