from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.sanitizers import (
    collapse_whitespace,
    mask_govt_id,
    sanitize_govt_id,
    sanitize_name,
    sanitize_phone,
    sanitize_string,
    sanitize_url,
)
from ..common.validators import (
    OTHER,
    Verdict,
    collect_errors,
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
from .model import BLOOD_TYPES, CIVIL_STATUSES, EMERGENCY_RELATIONSHIPS, GOVT_ID_FIELDS, EmployeeInfo


def _one_of(value: str, allowed, label: str, *, optional: bool = False) -> Verdict:
    if not value.strip():
        return Verdict(True) if optional else validate_required(value, label)
    if value.strip() not in allowed:
        return Verdict(False, f"{label} must be one of: {', '.join(allowed)}")
    return Verdict(True)


def validate_employee_info(
    info: EmployeeInfo, *, candidate_name: str = "", today: Optional[date] = None
) -> dict[str, str]:
    """Every failing field of the submission, keyed by its camelCase form name."""
    checks = {
        "dateOfBirth": validate_date_of_birth(info.date_of_birth, today=today),
        "placeOfBirth": validate_required(info.place_of_birth, "Place of Birth"),
        "civilStatus": _one_of(info.civil_status, CIVIL_STATUSES, "Civil Status"),
        "nationality": validate_required(info.nationality, "Nationality"),
        "bloodType": _one_of(info.blood_type, BLOOD_TYPES, "Blood Type", optional=True),
        "presentAddress": validate_address(info.present_address, "Present Address"),
        "permanentAddress": validate_address(info.permanent_address, "Permanent Address"),
        "phone": validate_phone(info.phone, "Phone number"),
        "email": validate_email(info.email, optional=True),
        "fbLink": validate_url(info.fb_link, "FB Link", optional=True),
        "govtIds": validate_at_least_one(
            {
                "SSS": info.sss_number,
                "TIN": info.tin_number,
                "PhilHealth": info.philhealth_number,
                "Pag-IBIG": info.pagibig_number,
                "GSIS": info.gsis_number,
                "PRC License": info.prc_license_number,
            },
            "government ID",
        ),
        "sssNumber": validate_sss_number(info.sss_number),
        "tinNumber": validate_tin_number(info.tin_number),
        "philhealthNumber": validate_philhealth_number(info.philhealth_number),
        "pagibigNumber": validate_pagibig_number(info.pagibig_number),
        "gsisNumber": validate_gsis_number(info.gsis_number),
        "prcLicenseNumber": validate_prc_license_number(info.prc_license_number),
        "emergencyContactName": validate_name(info.emergency_contact_name, "Emergency Contact Name"),
        "emergencyContactNumber": validate_phone(info.emergency_contact_number, "Emergency contact number"),
        "emergencyContactRelationship": validate_relationship(
            info.emergency_contact_relationship,
            EMERGENCY_RELATIONSHIPS,
            other_text=info.emergency_contact_relationship_other,
            label="Relationship",
        ),
    }
    errors = collect_errors(checks)

    if "emergencyContactName" not in errors:
        verdict = validate_not_same_person(candidate_name, info.emergency_contact_name)
        if not verdict.valid:
            errors["emergencyContactName"] = verdict.error or ""
    return errors


def sanitize_employee_info(info: EmployeeInfo) -> EmployeeInfo:
    cleaned = {
        "place_of_birth": sanitize_string(info.place_of_birth),
        "civil_status": sanitize_string(info.civil_status),
        "nationality": sanitize_string(info.nationality),
        "religion": sanitize_string(info.religion),
        "blood_type": sanitize_string(info.blood_type),
        "present_address": collapse_whitespace(sanitize_string(info.present_address)),
        "permanent_address": collapse_whitespace(sanitize_string(info.permanent_address)),
        "phone": sanitize_phone(info.phone),
        "email": sanitize_string(info.email).lower(),
        "messenger_name": sanitize_string(info.messenger_name),
        "fb_link": sanitize_url(info.fb_link),
        "prc_validity": sanitize_string(info.prc_validity),
        "emergency_contact_name": sanitize_name(info.emergency_contact_name),
        "emergency_contact_number": sanitize_phone(info.emergency_contact_number),
        "emergency_contact_relationship": sanitize_string(info.emergency_contact_relationship),
        "emergency_contact_relationship_other": (
            sanitize_string(info.emergency_contact_relationship_other)
            if info.emergency_contact_relationship.strip() == OTHER
            else ""
        ),
        "date_of_birth": info.date_of_birth.strip()[:10],
    }
    for name in GOVT_ID_FIELDS:
        cleaned[name] = sanitize_govt_id(getattr(info, name))
    return replace(info, **cleaned)


def masked(info: EmployeeInfo) -> EmployeeInfo:
    """Copy safe for display: government IDs show only their last 4 characters."""
    return replace(info, **{name: mask_govt_id(getattr(info, name)) for name in GOVT_ID_FIELDS})
