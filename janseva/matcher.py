"""
Eligibility matcher: compares a user profile against scheme/scholarship criteria

Everything here is pure and synchronous. The matcher holds no state between
calls, never performs I/O and never raises for bad data: missing or malformed
values fall back to their defaults and unexpected errors fail closed.
"""
import logging
from typing import Callable, Iterable, List, Optional, Sequence

from .models.profile import ALL_INDIA, UserProfile
from .models.program import EligibilityPartition, IneligibleProgram, MatchResult, Program
from .utils.validators import format_inr, normalize_text

logger = logging.getLogger(__name__)

DEFAULT_AGE_MIN = 0
DEFAULT_AGE_MAX = 100

NOT_ACTIVE_REASON = "Program is not active or approved by admin"
EVALUATION_ERROR_REASON = "Eligibility could not be determined for this program"

_FIELD_LABELS = {
    "role": "role",
    "age": "age",
    "state": "state",
    "category": "category",
    "annual_income": "annual income",
}

Check = Callable[[UserProfile, Program], Optional[str]]


def _value_text(value) -> str:
    if value is None:
        return ""
    return str(getattr(value, "value", value))


def _is_wildcard(value: str, substring: bool = False) -> bool:
    key = normalize_text(value)
    if substring and "all" in key.split():
        return True
    return key in ("all", normalize_text(ALL_INDIA))


def _set_check(label: str, values: Sequence[str], profile_value, substring_wildcard: bool = False) -> Optional[str]:
    """Membership check shared by the optional restriction fields"""
    if not values or any(_is_wildcard(v, substring_wildcard) for v in values):
        return None
    wanted = normalize_text(_value_text(profile_value))
    if wanted and wanted in {normalize_text(v) for v in values}:
        return None
    return f"{label} mismatch. Required: {', '.join(values)}"


class EligibilityMatcher:
    """Rule engine that decides whether a profile qualifies for a program"""

    def __init__(self):
        # Order matters: reasons are reported in this order
        self.checks: List[Check] = [
            self._check_role,
            self._check_income,
            self._check_age,
            self._check_state,
            self._check_category,
            self._check_gender,
            self._check_religion,
            self._check_education_level,
            self._check_class,
        ]

    def evaluate(self, profile: UserProfile, program: Program) -> MatchResult:
        """
        Evaluate one profile against one program

        Args:
            profile: User's eligibility profile
            program: Scheme or scholarship to check

        Returns:
            MatchResult with every failure reason, in evaluation order
        """
        program_id = getattr(program, "id", None)
        try:
            if not program.is_open():
                return MatchResult(program_id=program_id, eligible=False, reasons=[NOT_ACTIVE_REASON])

            missing = profile.missing_fields()
            if missing:
                labels = ", ".join(_FIELD_LABELS.get(name, name) for name in missing)
                return MatchResult(
                    program_id=program_id,
                    eligible=False,
                    reasons=[f"Profile is incomplete. Missing: {labels}"]
                )

            reasons = []
            for check in self.checks:
                reason = check(profile, program)
                if reason:
                    reasons.append(reason)

            return MatchResult(program_id=program_id, eligible=not reasons, reasons=reasons)

        except Exception as e:
            logger.error(f"Error evaluating eligibility for program {program_id}: {e}")
            return MatchResult(program_id=program_id, eligible=False, reasons=[EVALUATION_ERROR_REASON])

    def filter_eligible(self, profile: UserProfile, programs: Iterable[Program]) -> List[Program]:
        """Programs the profile qualifies for, in catalog order"""
        return [program for program in programs if self.evaluate(profile, program).eligible]

    def partition(self, profile: UserProfile, programs: Iterable[Program]) -> EligibilityPartition:
        """Split programs into eligible and ineligible (with reasons) in a single pass"""
        result = EligibilityPartition()
        for program in programs:
            match = self.evaluate(profile, program)
            if match.eligible:
                result.eligible.append(program)
            else:
                result.ineligible.append(IneligibleProgram(program=program, reasons=match.reasons))
        return result

    # Individual checks: each returns a failure reason, or None when it passes

    def _check_role(self, profile: UserProfile, program: Program) -> Optional[str]:
        if program.allows_any_role():
            return None
        wanted = normalize_text(_value_text(profile.role))
        if wanted in {normalize_text(role) for role in program.eligible_roles}:
            return None
        return f"Role mismatch. Required: {', '.join(program.eligible_roles)}"

    def _check_income(self, profile: UserProfile, program: Program) -> Optional[str]:
        if not program.income_limit:
            return None
        income = profile.annual_income or 0
        if income <= program.income_limit:
            return None
        return f"Income exceeds limit. Maximum: {format_inr(program.income_limit)}"

    def _check_age(self, profile: UserProfile, program: Program) -> Optional[str]:
        age_min = program.age_min if program.age_min is not None else DEFAULT_AGE_MIN
        age_max = program.age_max if program.age_max is not None else DEFAULT_AGE_MAX
        age = profile.age or 0
        if age_min <= age <= age_max:
            return None
        return f"Age outside allowed range. Required: {age_min}-{age_max} years"

    def _check_state(self, profile: UserProfile, program: Program) -> Optional[str]:
        return _set_check("State", program.eligible_states, profile.state, substring_wildcard=True)

    def _check_category(self, profile: UserProfile, program: Program) -> Optional[str]:
        return _set_check("Category", program.eligible_categories, profile.category)

    def _check_gender(self, profile: UserProfile, program: Program) -> Optional[str]:
        return _set_check("Gender", program.eligible_genders, profile.gender)

    def _check_religion(self, profile: UserProfile, program: Program) -> Optional[str]:
        return _set_check("Religion", program.eligible_religions, profile.religion)

    def _check_education_level(self, profile: UserProfile, program: Program) -> Optional[str]:
        return _set_check("Education level", program.eligible_education_levels, profile.education_level)

    def _check_class(self, profile: UserProfile, program: Program) -> Optional[str]:
        return _set_check("Class", program.eligible_classes, profile.class_level)


# Global matcher instance
matcher = EligibilityMatcher()


def evaluate(profile: UserProfile, program: Program) -> MatchResult:
    return matcher.evaluate(profile, program)


def filter_eligible(profile: UserProfile, programs: Iterable[Program]) -> List[Program]:
    return matcher.filter_eligible(profile, programs)


def partition(profile: UserProfile, programs: Iterable[Program]) -> EligibilityPartition:
    return matcher.partition(profile, programs)
