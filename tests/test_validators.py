from __future__ import annotations

from datetime import date

import pytest

from src.school_hrms.school_hrms.common.validators import (
    collect_errors,
    normalize_phone,
    require_non_empty,
    validate_address,
    validate_at_least_one,
    validate_date_of_birth,
    validate_email,
    validate_gsis_number,
    validate_name,
    validate_not_same_person,
    validate_pagibig_number,
    validate_philhealth_number,
    validate_phone,
    validate_prc_license_number,
    validate_relationship,
    validate_required,
    validate_sss_number,
    validate_tin_number,
    validate_url,
)
from src.school_hrms.school_hrms.core.exceptions import ValidationError

TODAY = date(2026, 3, 15)


def test_required_rejects_blank_with_label():
    verdict = validate_required("   ", "Place of Birth")
    assert not verdict.valid
    assert verdict.error == "Place of Birth is required."
    assert validate_required(" x ", "Place of Birth").valid


def test_require_non_empty_raises_and_trims():
    assert require_non_empty("  Ana ", "Name") == "Ana"
    with pytest.raises(ValidationError):
        require_non_empty("", "Name")


@pytest.mark.parametrize("name", ["Ana Reyes", "José Ma. Dela-Cruz", "Jr.", "Ñoño"])
def test_name_accepts_letters_spaces_periods_hyphens(name):
    assert validate_name(name).valid


@pytest.mark.parametrize("name", ["Ana2", "Ana_Reyes", "O'Neil", "Ana@"])
def test_name_rejects_digits_and_symbols(name):
    verdict = validate_name(name, "Emergency Contact Name")
    assert not verdict.valid
    assert verdict.error == "Emergency Contact Name must contain letters only (no numbers or special characters)"


def test_not_same_person_is_case_and_space_insensitive():
    verdict = validate_not_same_person("Ana  Reyes", "ana reyes")
    assert not verdict.valid
    assert "cannot be the same as" in verdict.error
    assert validate_not_same_person("Ana Reyes", "Ben Reyes").valid
    assert validate_not_same_person("", "Ana Reyes").valid


@pytest.mark.parametrize(
    "value",
    ["", "0917 123 4567", "+63 917-123-4567", "(0917)1234567", "abc", "+639171234567", "09-17"],
)
def test_phone_normalization_is_idempotent(value):
    once = normalize_phone(value)
    assert normalize_phone(once) == once
    assert once.isdigit() or once == ""


@pytest.mark.parametrize("value", ["09171234567", "0917-123-4567", "+63 917 123 4567", "639171234567"])
def test_phone_accepts_local_and_international(value):
    assert validate_phone(value).valid


@pytest.mark.parametrize("value", ["0917123456", "091712345678", "08171234567", "+63 817 123 4567", "63917123456"])
def test_phone_rejects_bad_shapes(value):
    verdict = validate_phone(value)
    assert not verdict.valid
    assert "09" in verdict.error


def test_phone_local_only_rejects_international_form():
    assert not validate_phone("+63 917 123 4567", allow_international=False).valid
    assert validate_phone("09171234567", allow_international=False).valid


def test_phone_optional_skips_blank():
    assert validate_phone("", optional=True).valid
    assert validate_phone("").error == "Phone number is required."


def test_email_shape():
    assert validate_email("ana@school.edu.ph").valid
    assert validate_email("", optional=True).valid
    for bad in ("ana", "ana@school", "@school.ph", "ana @school.ph"):
        verdict = validate_email(bad)
        assert verdict.error == "Please enter a valid email address"


def test_url_requires_scheme_and_dot():
    assert validate_url("").valid
    assert validate_url("https://facebook.com/ana").valid
    assert validate_url("http://x.y").valid
    assert not validate_url("facebook.com/ana").valid
    assert not validate_url("https://localhost").valid
    assert not validate_url("", optional=False).valid


def test_date_of_birth_rules():
    assert validate_date_of_birth("2000-01-01", today=TODAY).valid
    assert validate_date_of_birth("2000-02-30", today=TODAY).error == "Please enter a valid date"
    assert validate_date_of_birth("2026-03-16", today=TODAY).error == "Date of birth cannot be in the future"
    assert validate_date_of_birth("2011-03-16", today=TODAY).error == "Age must be at least 15 years"
    assert validate_date_of_birth("2011-03-15", today=TODAY).valid
    assert validate_date_of_birth("1925-03-14", today=TODAY).error == "Age cannot be more than 100 years"
    assert validate_date_of_birth("", optional=True).valid


def test_date_of_birth_without_age_check_allows_children():
    assert validate_date_of_birth("2020-05-01", check_age=False, today=TODAY).valid
    assert not validate_date_of_birth("2027-01-01", check_age=False, today=TODAY).valid


def test_address_minimum_length():
    assert validate_address("Manila").error == "Address must be at least 10 characters"
    assert validate_address("123 Rizal St., Manila").valid


def test_at_least_one_lists_the_group():
    verdict = validate_at_least_one({"SSS": "", "TIN": " ", "GSIS": None}, "government ID")
    assert verdict.error == "At least one government ID is required (SSS, TIN, or GSIS)"
    assert validate_at_least_one({"SSS": "", "TIN": "123456789"}, "government ID").valid


def test_relationship_other_requires_free_text():
    allowed = ["Spouse", "Parent", "Other"]
    assert validate_relationship("Parent", allowed).valid
    assert not validate_relationship("Cousin", allowed).valid
    assert validate_relationship("Other", allowed, other_text="").error == "Please specify the relationship"
    assert validate_relationship("Other", allowed, other_text="Godmother").valid
    assert validate_relationship("", allowed).error == "Relationship is required."


@pytest.mark.parametrize(
    "rule, good, bad",
    [
        (validate_sss_number, "34-1234567-8", "34-123456-8"),
        (validate_tin_number, "123-456-789", "123-45-678"),
        (validate_tin_number, "123-456-789-000", "123-456-789-0000"),
        (validate_philhealth_number, "12-345678901-2", "12-34567890-2"),
        (validate_pagibig_number, "1234-5678-9012", "1234-5678-901"),
        (validate_gsis_number, "12345678901", "1234567890"),
        (validate_prc_license_number, "1234567", "123456"),
    ],
)
def test_government_id_formats(rule, good, bad):
    assert rule(good).valid
    assert not rule(bad).valid
    assert rule("").valid


def test_collect_errors_keeps_only_failures():
    errors = collect_errors(
        {
            "name": validate_name(""),
            "email": validate_email("ana@school.ph"),
            "phone": validate_phone("123"),
        }
    )
    assert set(errors) == {"name", "phone"}
    assert errors["name"] == "Name is required."
