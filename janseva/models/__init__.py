"""
Models package for the Jan Seva Scheme Finder
"""

from .profile import (
    ALL_INDIA,
    Gender,
    Religion,
    Role,
    SocialCategory,
    UserProfile
)

from .program import (
    EligibilityPartition,
    EligibilityRequest,
    EligibilityResponse,
    IneligibleProgram,
    LifecycleStatus,
    MatchResult,
    Program,
    ProgramKind
)

__all__ = [
    # Profile models
    "ALL_INDIA",
    "Gender",
    "Religion",
    "Role",
    "SocialCategory",
    "UserProfile",

    # Program models
    "EligibilityPartition",
    "EligibilityRequest",
    "EligibilityResponse",
    "IneligibleProgram",
    "LifecycleStatus",
    "MatchResult",
    "Program",
    "ProgramKind"
]
