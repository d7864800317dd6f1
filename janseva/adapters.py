"""
Adapters between stored catalog/profile documents and the matcher's models

Schemes and scholarships live in two collections with different field names.
Both are mapped onto the single Program model here, so the matcher never sees
collection-specific shapes.
"""
import logging
from typing import Any, Dict, Optional

from .models.profile import Gender, Religion, Role, SocialCategory, UserProfile
from .models.program import LifecycleStatus, Program
from .utils.validators import parse_bool, parse_int, parse_number, parse_string_list

logger = logging.getLogger(__name__)

# How each collection spells its statuses when written back
STATUS_LABELS = {
    "scheme": {
        LifecycleStatus.DRAFT: "Draft",
        LifecycleStatus.ACTIVE: "Active",
        LifecycleStatus.ALWAYS_OPEN: "Always Open",
        LifecycleStatus.UPCOMING: "Upcoming",
        LifecycleStatus.EXPIRED: "Expired",
    },
    "scholarship": {
        LifecycleStatus.DRAFT: "draft",
        LifecycleStatus.ACTIVE: "live",
        LifecycleStatus.ALWAYS_OPEN: "always-open",
        LifecycleStatus.UPCOMING: "upcoming",
        LifecycleStatus.EXPIRED: "expired",
    },
}


def _first_present(doc: Dict[str, Any], *keys: str) -> Any:
    """Value of the first key that is set to something non-empty"""
    for key in keys:
        value = doc.get(key)
        if value is None:
            continue
        if isinstance(value, (str, list, tuple)) and len(value) == 0:
            continue
        return value
    return None


def _document_id(doc: Dict[str, Any]) -> Optional[str]:
    value = _first_present(doc, "id", "_id")
    return str(value) if value is not None else None


def program_from_scheme(doc: Dict[str, Any]) -> Program:
    """
    Build a Program from a document in the schemes collection

    Scheme documents carry no separate publish flag; the Draft/Active status
    set from the admin panel is the approval gate, so a missing isPublished
    counts as published.
    """
    if not isinstance(doc, dict):
        return Program(kind="scheme")

    published = doc["isPublished"] is True if "isPublished" in doc else True

    return Program(
        id=_document_id(doc),
        kind="scheme",
        name=_first_present(doc, "name", "title"),
        description=doc.get("description"),
        department=doc.get("department"),
        benefit=_first_present(doc, "benefitAmount", "benefit"),
        link=doc.get("link"),
        deadline=doc.get("deadline"),
        nav_categories=doc.get("navCategories"),
        lifecycle_status=doc.get("status") or LifecycleStatus.DRAFT,
        is_published=published,
        eligible_roles=_first_present(doc, "eligibleRoles", "targetRole"),
        income_limit=doc.get("incomeLimit"),
        age_min=doc.get("ageMin"),
        age_max=doc.get("ageMax"),
        eligible_states=_first_present(doc, "eligibleStates", "state"),
        eligible_categories=_first_present(doc, "eligibleCategories", "category"),
        eligible_genders=_first_present(doc, "eligibleGenders", "gender"),
        eligible_religions=_first_present(doc, "eligibleReligions", "religion"),
        eligible_education_levels=doc.get("eligibleEducationLevels"),
        eligible_classes=doc.get("eligibleClasses"),
        required_documents=_first_present(doc, "documents", "requiredDocuments"),
    )


def program_from_scholarship(doc: Dict[str, Any]) -> Program:
    """
    Build a Program from a document in the scholarships collection

    Scholarships must be explicitly published (isPublished is literally true).
    Their "category" is a browsing tag (Merit-Based, Need-Based, ...), not a
    social category restriction; eligibleCategories holds the restriction.
    """
    if not isinstance(doc, dict):
        return Program(kind="scholarship")

    nav_categories = parse_string_list(doc.get("navCategories"))
    if doc.get("category"):
        nav_categories = parse_string_list([doc["category"]] + nav_categories)

    return Program(
        id=_document_id(doc),
        kind="scholarship",
        name=_first_present(doc, "title", "name"),
        description=doc.get("description"),
        department=_first_present(doc, "provider", "department"),
        benefit=_first_present(doc, "award", "benefitAmount"),
        link=doc.get("link"),
        deadline=doc.get("deadline"),
        nav_categories=nav_categories,
        lifecycle_status=doc.get("status") or LifecycleStatus.DRAFT,
        is_published=doc.get("isPublished") is True,
        eligible_roles=_first_present(doc, "eligibleRoles", "targetRole"),
        income_limit=doc.get("incomeLimit"),
        age_min=doc.get("ageMin"),
        age_max=doc.get("ageMax"),
        eligible_states=_first_present(doc, "eligibleStates", "state"),
        eligible_categories=doc.get("eligibleCategories"),
        eligible_genders=_first_present(doc, "eligibleGenders", "gender"),
        eligible_religions=_first_present(doc, "eligibleReligions", "religion"),
        eligible_education_levels=_first_present(doc, "eligibleEducationLevels", "studyLevel"),
        eligible_classes=_first_present(doc, "eligibleClasses", "class"),
        required_documents=_first_present(doc, "requiredDocuments", "documents"),
    )


def program_from_document(doc: Dict[str, Any], kind: str) -> Program:
    """Dispatch to the adapter for the collection a document came from"""
    if kind == "scholarship":
        return program_from_scholarship(doc)
    return program_from_scheme(doc)


def _single_or_list(values):
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return list(values)


def program_to_document(program: Program) -> Dict[str, Any]:
    """
    Convert a Program back into its collection's document shape

    Args:
        program: Program to store

    Returns:
        Document dict without the id (the store owns identifiers)
    """
    status = STATUS_LABELS[program.kind][program.lifecycle_status]
    doc = {
        "description": program.description,
        "link": program.link,
        "deadline": program.deadline,
        "status": status,
        "isPublished": program.is_published,
        "navCategories": list(program.nav_categories),
        "incomeLimit": program.income_limit,
        "ageMin": program.age_min,
        "ageMax": program.age_max,
        "eligibleRoles": list(program.eligible_roles),
        "eligibleStates": list(program.eligible_states),
        "eligibleCategories": list(program.eligible_categories),
        "eligibleGenders": list(program.eligible_genders),
        "eligibleReligions": list(program.eligible_religions),
        "eligibleEducationLevels": list(program.eligible_education_levels),
        "eligibleClasses": list(program.eligible_classes),
    }

    if program.kind == "scheme":
        doc.update({
            "name": program.name,
            "department": program.department,
            "benefitAmount": program.benefit,
            "targetRole": _single_or_list(program.eligible_roles),
            "state": _single_or_list(program.eligible_states),
            "category": _single_or_list(program.eligible_categories),
            "documents": list(program.required_documents),
        })
    else:
        doc.update({
            "title": program.name,
            "provider": program.department,
            "award": program.benefit,
            "requiredDocuments": list(program.required_documents),
        })
    return doc


# Keys that carry the same program field under different names. When an
# update sets one of them, stale values under the other names are dropped.
_FIELD_GROUPS = {
    "scheme": [
        ("name", "title"),
        ("benefitAmount", "benefit"),
        ("eligibleRoles", "targetRole"),
        ("eligibleStates", "state"),
        ("eligibleCategories", "category"),
        ("eligibleGenders", "gender"),
        ("eligibleReligions", "religion"),
        ("documents", "requiredDocuments"),
    ],
    "scholarship": [
        ("title", "name"),
        ("provider", "department"),
        ("award", "benefitAmount"),
        ("eligibleRoles", "targetRole"),
        ("eligibleStates", "state"),
        ("eligibleGenders", "gender"),
        ("eligibleReligions", "religion"),
        ("eligibleEducationLevels", "studyLevel"),
        ("eligibleClasses", "class"),
        ("requiredDocuments", "documents"),
        ("navCategories", "category"),
    ],
}


def merge_program_documents(existing: Dict[str, Any], changes: Dict[str, Any], kind: str) -> Dict[str, Any]:
    """
    Apply a partial update to a stored program document

    Args:
        existing: Document currently in the catalog
        changes: Fields sent by the admin
        kind: "scheme" or "scholarship"

    Returns:
        New merged document; neither input is modified
    """
    merged = dict(existing)
    for group in _FIELD_GROUPS.get(kind, []):
        if any(key in changes for key in group):
            for key in group:
                merged.pop(key, None)
    merged.update(changes)
    return merged


def _lookup_or_none(enum_type, value):
    member = enum_type.lookup(value)
    if member is None and value not in (None, ""):
        logger.warning(f"Ignoring unrecognised {enum_type.__name__} value in profile: {value!r}")
    return member


def _non_negative(value, upper=None):
    if value is None or value < 0:
        return None
    if upper is not None and value > upper:
        return None
    return value


def _text_or_none(value) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def profile_from_document(doc: Optional[Dict[str, Any]]) -> UserProfile:
    """
    Build a UserProfile from a stored profile document

    Unparseable values are dropped instead of raising, which leaves the
    profile incomplete when a required field is affected.
    """
    if not isinstance(doc, dict):
        return UserProfile()

    return UserProfile(
        role=_lookup_or_none(Role, _first_present(doc, "role")),
        age=_non_negative(parse_int(doc.get("age")), upper=150),
        gender=_lookup_or_none(Gender, doc.get("gender")),
        state=_text_or_none(doc.get("state")),
        category=_lookup_or_none(SocialCategory, doc.get("category")),
        religion=_lookup_or_none(Religion, doc.get("religion")),
        education_level=_text_or_none(_first_present(doc, "educationLevel", "education_level")),
        class_level=_text_or_none(_first_present(doc, "class", "class_level")),
        course=_text_or_none(doc.get("course")),
        annual_income=_non_negative(parse_number(_first_present(doc, "annualIncome", "annual_income", "income"))),
        disability_status=parse_bool(_first_present(doc, "disabilityStatus", "disability_status")),
        land_size=_non_negative(parse_number(_first_present(doc, "landSize", "land_size"))),
    )


def profile_to_document(profile: UserProfile) -> Dict[str, Any]:
    """Stored form of a profile, using the camelCase names of the profile form"""
    doc = profile.model_dump(by_alias=True, mode="json")
    doc["disabilityStatus"] = "Yes" if profile.disability_status else "No"
    return doc
