"""
Unit tests for adapters.py

Tests mapping of scheme, scholarship and profile documents onto the
matcher's models, including malformed data.
"""

from bson import ObjectId

from janseva.adapters import (
    merge_program_documents,
    profile_from_document,
    profile_to_document,
    program_from_document,
    program_from_scheme,
    program_from_scholarship,
    program_to_document,
)
from janseva.matcher import evaluate
from janseva.models import Gender, LifecycleStatus, Role, SocialCategory


def scheme_doc(**overrides):
    doc = {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "name": "PM Kisan Samman Nidhi",
        "department": "Ministry of Agriculture",
        "description": "Income support for farmers",
        "benefitAmount": "₹6000 per year",
        "link": "https://pmkisan.gov.in",
        "targetRole": "Farmer",
        "incomeLimit": "200000",
        "category": "All",
        "state": "All India",
        "ageMin": "18",
        "ageMax": "",
        "documents": ["Land Record", "Aadhaar Card (Ref)", "Land Record"],
        "status": "Active",
        "deadline": "2026-12-31",
        "navCategories": ["agriculture"],
    }
    doc.update(overrides)
    return doc


def scholarship_doc(**overrides):
    doc = {
        "_id": "sch-42",
        "title": "Post Matric Scholarship",
        "description": "For SC/ST students",
        "award": "₹50,000 per year",
        "class": ["Class 11", "Class 12"],
        "category": "Need-Based",
        "gender": "All",
        "state": "Maharashtra",
        "religion": "All",
        "studyLevel": "School",
        "eligibleCategories": ["SC", "ST"],
        "incomeLimit": 250000,
        "status": "live",
        "isPublished": True,
        "deadline": "2026-10-31",
        "link": "https://scholarships.gov.in",
    }
    doc.update(overrides)
    return doc


def test_scheme_document_mapping():
    program = program_from_scheme(scheme_doc())

    assert program.id == "507f1f77bcf86cd799439011"
    assert program.kind == "scheme"
    assert program.name == "PM Kisan Samman Nidhi"
    assert program.benefit == "₹6000 per year"
    assert program.lifecycle_status == LifecycleStatus.ACTIVE
    assert program.is_published is True
    assert program.eligible_roles == ["Farmer"]
    assert program.income_limit == 200000
    assert program.age_min == 18
    assert program.age_max is None
    assert program.eligible_states == ["All India"]
    assert program.eligible_categories == ["All"]
    assert program.required_documents == ["Land Record", "Aadhaar Card (Ref)"]
    assert program.nav_categories == ["agriculture"]


def test_scheme_without_status_is_draft():
    doc = scheme_doc()
    del doc["status"]

    assert program_from_scheme(doc).lifecycle_status == LifecycleStatus.DRAFT


def test_scheme_explicitly_unpublished():
    assert program_from_scheme(scheme_doc(isPublished=False)).is_published is False
    assert program_from_scheme(scheme_doc(isPublished="yes")).is_published is False


def test_scholarship_document_mapping():
    program = program_from_scholarship(scholarship_doc())

    assert program.id == "sch-42"
    assert program.kind == "scholarship"
    assert program.name == "Post Matric Scholarship"
    assert program.benefit == "₹50,000 per year"
    assert program.lifecycle_status == LifecycleStatus.ACTIVE
    assert program.eligible_classes == ["Class 11", "Class 12"]
    assert program.eligible_categories == ["SC", "ST"]
    assert program.eligible_genders == ["All"]
    assert program.eligible_states == ["Maharashtra"]
    assert program.eligible_education_levels == ["School"]
    assert program.nav_categories == ["Need-Based"]
    assert program.income_limit == 250000


def test_scholarship_requires_literal_published_flag():
    assert program_from_scholarship(scholarship_doc(isPublished="true")).is_published is False
    doc = scholarship_doc()
    del doc["isPublished"]
    assert program_from_scholarship(doc).is_published is False


def test_scholarship_prefers_explicit_eligibility_lists():
    program = program_from_scholarship(scholarship_doc(eligibleClasses=["Graduation"], eligibleStates=["Delhi"]))

    assert program.eligible_classes == ["Graduation"]
    assert program.eligible_states == ["Delhi"]


def test_malformed_documents_default_instead_of_raising():
    program = program_from_scheme({
        "name": None,
        "incomeLimit": {"nested": True},
        "ageMin": "abc",
        "ageMax": [],
        "state": 42,
        "targetRole": None,
        "documents": "Income Certificate",
        "status": 7,
        "isPublished": "maybe",
    })

    assert program.name == ""
    assert program.income_limit is None
    assert program.age_min is None
    assert program.age_max is None
    assert program.eligible_states == []
    assert program.eligible_roles == []
    assert program.required_documents == ["Income Certificate"]
    assert program.lifecycle_status == LifecycleStatus.DRAFT
    assert program.is_published is False


def test_non_dict_documents_give_empty_programs():
    assert program_from_scheme(None).kind == "scheme"
    assert program_from_scholarship("oops").kind == "scholarship"


def test_same_program_from_both_collections_matches_identically():
    profile = profile_from_document({
        "role": "Student", "age": "16", "state": "maharashtra", "category": "SC",
        "gender": "Female", "religion": "Buddhist", "class": "Class 12", "annualIncome": "120000",
    })
    scheme = program_from_scheme({
        "name": "Shared", "status": "Active", "state": "Maharashtra",
        "eligibleCategories": ["SC", "ST"], "eligibleClasses": ["Class 11", "Class 12"],
        "incomeLimit": 250000,
    })
    scholarship = program_from_scholarship({
        "title": "Shared", "status": "live", "isPublished": True, "state": "Maharashtra",
        "eligibleCategories": ["SC", "ST"], "class": ["Class 11", "Class 12"],
        "incomeLimit": "250000",
    })

    assert evaluate(profile, scheme) == evaluate(profile, scholarship).model_copy(update={"program_id": None})
    assert evaluate(profile, scheme).eligible is True


def test_program_from_document_dispatches_on_kind():
    assert program_from_document(scholarship_doc(), "scholarship").kind == "scholarship"
    assert program_from_document(scheme_doc(), "scheme").kind == "scheme"


def test_scheme_document_round_trip_preserves_matching_fields():
    program = program_from_scheme(scheme_doc())

    doc = program_to_document(program)
    restored = program_from_scheme(doc)

    assert doc["status"] == "Active"
    assert doc["targetRole"] == "Farmer"
    assert restored.model_copy(update={"id": program.id}) == program


def test_scholarship_document_uses_scholarship_field_names():
    program = program_from_scholarship(scholarship_doc())

    doc = program_to_document(program)

    assert doc["title"] == "Post Matric Scholarship"
    assert doc["award"] == "₹50,000 per year"
    assert doc["status"] == "live"
    assert "name" not in doc
    assert program_from_scholarship(doc).nav_categories == ["Need-Based"]


def test_merge_replaces_aliased_fields():
    existing = {"name": "Old", "state": "Delhi", "eligibleStates": ["Delhi"], "status": "Active"}

    merged = merge_program_documents(existing, {"state": "Kerala"}, "scheme")

    assert merged == {"name": "Old", "state": "Kerala", "status": "Active"}
    assert existing["eligibleStates"] == ["Delhi"]
    assert program_from_scheme(merged).eligible_states == ["Kerala"]


def test_profile_from_form_document():
    profile = profile_from_document({
        "role": "student",
        "age": "19",
        "gender": "FEMALE",
        "state": "Karnataka",
        "category": "obc",
        "religion": "All",
        "educationLevel": "Undergraduate",
        "class": "Graduation",
        "course": "Science",
        "annualIncome": "1,80,000",
        "disabilityStatus": "Yes",
        "landSize": "",
        "userId": "abc",
    })

    assert profile.role == Role.STUDENT
    assert profile.age == 19
    assert profile.gender == Gender.FEMALE
    assert profile.category == SocialCategory.OBC
    assert profile.class_level == "Graduation"
    assert profile.annual_income == 180000
    assert profile.disability_status is True
    assert profile.land_size is None
    assert profile.is_complete()


def test_profile_with_bad_values_is_incomplete_not_an_error():
    profile = profile_from_document({
        "role": "Astronaut",
        "age": -4,
        "state": "Delhi",
        "category": "General",
        "annualIncome": "lots",
    })

    assert profile.role is None
    assert profile.age is None
    assert profile.annual_income is None
    assert profile.missing_fields() == ["role", "age", "annual_income"]


def test_profile_from_missing_document():
    assert profile_from_document(None).is_complete() is False


def test_profile_document_uses_form_field_names():
    profile = profile_from_document({"role": "Farmer", "age": 40, "landSize": 2.5, "disabilityStatus": "No"})

    doc = profile_to_document(profile)

    assert doc["role"] == "Farmer"
    assert doc["landSize"] == 2.5
    assert doc["disabilityStatus"] == "No"
    assert profile_from_document(doc) == profile
