"""
API routes for the Jan Seva Scheme Finder
"""

from .admin import router as admin_router
from .eligibility import router as eligibility_router
from .profile import router as profile_router
from .programs import router as programs_router

__all__ = [
    "admin_router",
    "eligibility_router",
    "profile_router",
    "programs_router"
]
