"""
Pydantic models for schemes and scholarships (programs) and match results
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .profile import UserProfile
from ..utils.validators import (
    normalize_text,
    parse_bool,
    parse_int,
    parse_number,
    parse_string_list
)


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


ProgramKind = Literal["scheme", "scholarship"]


class LifecycleStatus(str, Enum):
    """Where a program is in its admin lifecycle"""
    DRAFT = "draft"
    ACTIVE = "active"
    ALWAYS_OPEN = "always-open"
    UPCOMING = "upcoming"
    EXPIRED = "expired"

    @classmethod
    def parse(cls, value: Any) -> "LifecycleStatus":
        """Parse stored status strings; unknown values are treated as draft"""
        if isinstance(value, cls):
            return value
        key = normalize_text(value).replace('_', '-').replace(' ', '-')
        if key == "live":
            return cls.ACTIVE
        if key == "alwaysopen":
            return cls.ALWAYS_OPEN
        for member in cls:
            if member.value == key:
                return member
        return cls.DRAFT

    @property
    def is_matchable(self) -> bool:
        return self in (LifecycleStatus.ACTIVE, LifecycleStatus.ALWAYS_OPEN)


# Role values that mean "open to everyone" when listed on a program
ANY_ROLE_VALUES = frozenset({"any", "all"})

# Open to everyone only when it is the program's sole target role
GENERAL_CITIZEN_ROLE = "general citizen"


class Program(BaseModel):
    """A scheme or scholarship record, unified across both catalog collections"""
    id: Optional[str] = Field(default=None, description="Catalog document identifier")
    kind: ProgramKind = Field(default="scheme", description="Origin collection")
    name: str = Field(default="", description="Scheme name or scholarship title")
    description: str = Field(default="")
    department: Optional[str] = Field(default=None, description="Department or ministry")
    benefit: Optional[str] = Field(default=None, description="Benefit amount or award text")
    link: Optional[str] = Field(default=None, description="Official application link")
    deadline: Optional[str] = Field(default=None, description="Application deadline")
    nav_categories: List[str] = Field(default_factory=list, description="Browsing categories")

    lifecycle_status: LifecycleStatus = Field(default=LifecycleStatus.DRAFT)
    is_published: bool = Field(default=False, description="Admin approved for public display")

    eligible_roles: List[str] = Field(default_factory=list, description="Empty means any role")
    income_limit: Optional[float] = Field(default=None, description="Maximum annual income; None means no limit")
    age_min: Optional[int] = Field(default=None, description="Minimum age; None means 0")
    age_max: Optional[int] = Field(default=None, description="Maximum age; None means 100")
    eligible_states: List[str] = Field(default_factory=list)
    eligible_categories: List[str] = Field(default_factory=list)
    eligible_genders: List[str] = Field(default_factory=list)
    eligible_religions: List[str] = Field(default_factory=list)
    eligible_education_levels: List[str] = Field(default_factory=list)
    eligible_classes: List[str] = Field(default_factory=list)

    required_documents: List[str] = Field(default_factory=list, description="Display only")

    @field_validator('id', 'department', 'benefit', 'link', 'deadline', mode='before')
    @classmethod
    def optional_text(cls, v):
        if v is None:
            return None
        if isinstance(v, datetime):
            return v.date().isoformat()
        text = str(v).strip()
        return text or None

    @field_validator('name', 'description', mode='before')
    @classmethod
    def required_text(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @field_validator('kind', mode='before')
    @classmethod
    def validate_kind(cls, v):
        if normalize_text(v) == "scholarship":
            return "scholarship"
        return "scheme"

    @field_validator('lifecycle_status', mode='before')
    @classmethod
    def validate_status(cls, v):
        return LifecycleStatus.parse(v)

    @field_validator('is_published', mode='before')
    @classmethod
    def validate_published(cls, v):
        return parse_bool(v)

    @field_validator(
        'nav_categories', 'eligible_roles', 'eligible_states', 'eligible_categories',
        'eligible_genders', 'eligible_religions', 'eligible_education_levels',
        'eligible_classes', 'required_documents', mode='before'
    )
    @classmethod
    def validate_string_list(cls, v):
        return parse_string_list(v)

    @field_validator('income_limit', mode='before')
    @classmethod
    def validate_income_limit(cls, v):
        limit = parse_number(v)
        if limit is None or limit <= 0:
            return None
        return limit

    @field_validator('age_min', mode='before')
    @classmethod
    def validate_age_min(cls, v):
        age = parse_int(v)
        if age is None or age < 0:
            return None
        return age

    @field_validator('age_max', mode='before')
    @classmethod
    def validate_age_max(cls, v):
        # 0 comes from an empty number input on the admin form
        age = parse_int(v)
        if age is None or age <= 0:
            return None
        return age

    def allows_any_role(self) -> bool:
        """True when the role restriction is absent or names a wildcard role"""
        if not self.eligible_roles:
            return True
        roles = [normalize_text(role) for role in self.eligible_roles]
        if roles == [GENERAL_CITIZEN_ROLE]:
            return True
        return any(role in ANY_ROLE_VALUES for role in roles)

    def is_open(self) -> bool:
        """Active or always-open, and approved for public display"""
        return self.lifecycle_status.is_matchable and self.is_published is True

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "pm_young_achievers",
                "kind": "scholarship",
                "name": "PM YASASVI Post Matric Scholarship",
                "description": "Scholarship for OBC, EBC and DNT students in class 11 and above.",
                "lifecycle_status": "active",
                "is_published": True,
                "eligible_roles": ["Student"],
                "income_limit": 250000,
                "age_min": 14,
                "age_max": 30,
                "eligible_states": ["All India"],
                "eligible_categories": ["OBC"],
                "eligible_classes": ["Class 11", "Class 12", "Graduation"],
                "required_documents": ["Income Certificate", "Caste Certificate", "Marksheet"]
            }
        }
    )


class MatchResult(BaseModel):
    """Result of matching one profile against one program"""
    program_id: Optional[str] = Field(None, description="Program identifier")
    eligible: bool = Field(..., description="Whether the profile satisfies every check")
    reasons: List[str] = Field(default_factory=list, description="Failure reasons in evaluation order")

    model_config = ConfigDict(frozen=True)


class IneligibleProgram(BaseModel):
    """A program the user does not qualify for, with the reasons why"""
    program: Program
    reasons: List[str] = Field(default_factory=list)


class EligibilityPartition(BaseModel):
    """Every program of a catalog, split into eligible and ineligible"""
    eligible: List[Program] = Field(default_factory=list)
    ineligible: List[IneligibleProgram] = Field(default_factory=list)


class EligibilityRequest(BaseModel):
    """Request to check an inline profile against the catalog"""
    profile: UserProfile = Field(..., description="User's profile information")
    kind: Optional[ProgramKind] = Field(None, description="Only check schemes or scholarships")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "profile": {
                    "role": "Farmer",
                    "age": 45,
                    "state": "Karnataka",
                    "category": "General",
                    "annualIncome": 120000,
                    "landSize": 2.5
                },
                "kind": "scheme"
            }
        }
    )


class EligibilityResponse(BaseModel):
    """Complete eligibility response for a user"""
    user_id: Optional[str] = Field(None, description="User identifier")
    total_programs_checked: int = Field(..., description="Total number of programs checked")
    eligible_count: int = Field(..., description="Number of eligible programs")
    eligible: List[Program] = Field(default_factory=list)
    ineligible: List[IneligibleProgram] = Field(default_factory=list)
    checked_at: datetime = Field(default_factory=get_current_utc_time)
    processing_time_ms: Optional[float] = Field(None, description="Time taken to process request")
