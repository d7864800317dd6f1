"""
Pydantic models for user eligibility profiles
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from ..utils.validators import normalize_text, parse_bool


class _LookupEnum(str, Enum):
    """String enum that can be looked up case-insensitively by value or name"""

    @classmethod
    def lookup(cls, value) -> Optional["_LookupEnum"]:
        if isinstance(value, cls):
            return value
        key = normalize_text(value)
        if not key:
            return None
        for member in cls:
            if key in (normalize_text(member.value), normalize_text(member.name.replace('_', ' '))):
                return member
        return None


class Role(_LookupEnum):
    STUDENT = "Student"
    FARMER = "Farmer"
    WORKER = "Worker"
    GENERAL_CITIZEN = "General Citizen"
    SENIOR_CITIZEN = "Senior Citizen"


class Gender(_LookupEnum):
    MALE = "Male"
    FEMALE = "Female"
    ALL = "All"


class SocialCategory(_LookupEnum):
    GENERAL = "General"
    OBC = "OBC"
    SC = "SC"
    ST = "ST"


class Religion(_LookupEnum):
    ALL = "All"
    HINDU = "Hindu"
    MUSLIM = "Muslim"
    CHRISTIAN = "Christian"
    SIKH = "Sikh"
    BUDDHIST = "Buddhist"


ALL_INDIA = "All India"

# Fields that must be present before a profile is matched against anything
REQUIRED_PROFILE_FIELDS = ("role", "age", "state", "category", "annual_income")


class UserProfile(BaseModel):
    """User profile information for eligibility checking"""
    role: Optional[Role] = Field(None, description="Who the user is (Student, Farmer, ...)")
    age: Optional[int] = Field(None, ge=0, le=150, description="User's age in years")
    gender: Optional[Gender] = Field(None, description="User's gender")
    state: Optional[str] = Field(None, description="State of residence or 'All India'")
    category: Optional[SocialCategory] = Field(None, description="Social category")
    religion: Optional[Religion] = Field(None, description="User's religion")
    education_level: Optional[str] = Field(None, alias="educationLevel", description="Current education level")
    class_level: Optional[str] = Field(None, alias="class", description="Current class (students only)")
    course: Optional[str] = Field(None, description="Course of study (students only)")
    annual_income: Optional[float] = Field(None, ge=0, alias="annualIncome", description="Annual family income in rupees")
    disability_status: bool = Field(False, alias="disabilityStatus", description="Whether user has a disability")
    land_size: Optional[float] = Field(None, ge=0, alias="landSize", description="Land holding in acres (farmers only)")

    @field_validator('role', 'gender', 'category', 'religion', mode='before')
    @classmethod
    def validate_choice(cls, v, info):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        enum_type = {
            'role': Role,
            'gender': Gender,
            'category': SocialCategory,
            'religion': Religion,
        }[info.field_name]
        member = enum_type.lookup(v)
        if member is None:
            valid = [m.value for m in enum_type]
            raise ValueError(f'{info.field_name} must be one of: {valid}')
        return member

    @field_validator('age', 'annual_income', 'land_size', mode='before')
    @classmethod
    def blank_number_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('state', 'education_level', 'class_level', 'course', mode='before')
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator('disability_status', mode='before')
    @classmethod
    def validate_disability(cls, v):
        if v is None or v == "":
            return False
        return parse_bool(v)

    def missing_fields(self) -> List[str]:
        """Names of the required fields that are not filled in"""
        return [name for name in REQUIRED_PROFILE_FIELDS if getattr(self, name) is None]

    def is_complete(self) -> bool:
        """A profile is complete only when role, age, state, category and income are present"""
        return not self.missing_fields()

    model_config = ConfigDict(
        validate_by_name=True,
        json_schema_extra={
            "example": {
                "role": "Student",
                "age": 19,
                "gender": "Female",
                "state": "Maharashtra",
                "category": "OBC",
                "religion": "Hindu",
                "educationLevel": "Undergraduate",
                "class": "Graduation",
                "course": "Engineering",
                "annualIncome": 180000,
                "disabilityStatus": "No"
            }
        }
    )
