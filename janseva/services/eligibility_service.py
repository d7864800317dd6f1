"""
Eligibility service for checking user profiles against the program catalog
"""
import logging
import time
from typing import Optional

from fastapi import Depends

from ..matcher import EligibilityMatcher, matcher as default_matcher
from ..models.profile import UserProfile
from ..models.program import EligibilityResponse
from .catalog_service import CatalogService, get_catalog_service
from .profile_service import ProfileNotFoundError, ProfileService, get_profile_service

logger = logging.getLogger(__name__)


class EligibilityService:
    """Service that loads profiles and catalog data and runs the matcher"""

    def __init__(
        self,
        catalog: CatalogService,
        profiles: ProfileService,
        matcher: EligibilityMatcher = default_matcher
    ):
        self.catalog = catalog
        self.profiles = profiles
        self.matcher = matcher

    async def check_profile(
        self,
        profile: UserProfile,
        kind: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> EligibilityResponse:
        """
        Check a profile against every open program in the catalog

        Args:
            profile: User's profile information
            kind: Only check "scheme" or "scholarship" programs (if None, check all)
            user_id: Identity the profile belongs to, echoed in the response

        Returns:
            EligibilityResponse with eligible programs and reasons for the other
            open programs
        """
        start_time = time.time()

        # Drafts and unpublished programs are never shown, not even as ineligible
        programs = [program for program in await self.catalog.list_programs(kind) if program.is_open()]
        result = self.matcher.partition(profile, programs)

        processing_time = (time.time() - start_time) * 1000

        response = EligibilityResponse(
            user_id=user_id,
            total_programs_checked=len(programs),
            eligible_count=len(result.eligible),
            eligible=result.eligible,
            ineligible=result.ineligible,
            processing_time_ms=processing_time
        )

        logger.info(
            f"Eligibility check completed: {response.eligible_count}/{response.total_programs_checked} programs eligible"
        )
        return response

    async def check_user(self, user_id: str, kind: Optional[str] = None) -> EligibilityResponse:
        """
        Check a user's stored profile against the catalog

        Raises:
            ProfileNotFoundError: if the user has not saved a profile
        """
        profile = await self.profiles.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        if not profile.is_complete():
            logger.info(f"Profile for {user_id} is incomplete: missing {', '.join(profile.missing_fields())}")

        return await self.check_profile(profile, kind=kind, user_id=user_id)


def get_eligibility_service(
    catalog: CatalogService = Depends(get_catalog_service),
    profiles: ProfileService = Depends(get_profile_service)
) -> EligibilityService:
    """FastAPI dependency wiring the eligibility service to its stores"""
    return EligibilityService(catalog, profiles)
