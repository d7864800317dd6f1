"""
API routes for eligibility checking
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth import get_current_user_id
from ..models.program import EligibilityRequest, EligibilityResponse, ProgramKind
from ..services.eligibility_service import EligibilityService, get_eligibility_service
from ..services.profile_service import ProfileNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


@router.post("/check", response_model=EligibilityResponse)
async def check_eligibility(
    request: EligibilityRequest,
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Check an inline profile against schemes and scholarships
    """
    try:
        return await service.check_profile(request.profile, kind=request.kind)

    except Exception as e:
        logger.error(f"Error checking eligibility: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check eligibility: {str(e)}"
        )


@router.get("/me", response_model=EligibilityResponse)
async def check_my_eligibility(
    kind: Optional[ProgramKind] = Query(None, description="Only check schemes or scholarships"),
    user_id: str = Depends(get_current_user_id),
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Check the signed-in user's saved profile against the catalog
    """
    try:
        return await service.check_user(user_id, kind=kind)

    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Please complete your profile first")
    except Exception as e:
        logger.error(f"Error checking eligibility for {user_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check eligibility: {str(e)}"
        )


@router.get("/me/eligible")
async def get_my_eligible_programs(
    kind: Optional[ProgramKind] = Query(None, description="Only schemes or scholarships"),
    user_id: str = Depends(get_current_user_id),
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Get only the programs the signed-in user currently qualifies for
    """
    try:
        response = await service.check_user(user_id, kind=kind)

        return {
            "user_id": user_id,
            "total_eligible": response.eligible_count,
            "eligible_programs": [program.model_dump(mode="json") for program in response.eligible]
        }

    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Please complete your profile first")
    except Exception as e:
        logger.error(f"Error fetching eligible programs for {user_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve eligible programs: {str(e)}"
        )
