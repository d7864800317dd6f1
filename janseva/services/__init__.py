"""
Services package for the Jan Seva Scheme Finder
"""

from .catalog_service import CatalogService, filter_listing, get_catalog_service
from .profile_service import ProfileNotFoundError, ProfileService, get_profile_service
from .eligibility_service import EligibilityService, get_eligibility_service

__all__ = [
    "CatalogService",
    "filter_listing",
    "get_catalog_service",
    "ProfileNotFoundError",
    "ProfileService",
    "get_profile_service",
    "EligibilityService",
    "get_eligibility_service"
]
