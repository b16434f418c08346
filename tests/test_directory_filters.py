from __future__ import annotations

from datetime import date

import pytest

from conftest import make_record
from src.school_hrms.school_hrms.core.enums import EmploymentStatus, ServiceBucket
from src.school_hrms.school_hrms.core.exceptions import ValidationError
from src.school_hrms.school_hrms.directory.filters import filter_records, matches
from src.school_hrms.school_hrms.directory.model import DirectoryCriteria

TODAY = date(2026, 3, 15)

RECORDS = [
    make_record("E1", "Ana", "Reyes", department="Mathematics", position="Teacher I", hire_date=date(2024, 1, 1)),
    make_record("E2", "Ben", "Santos", department="Science", position="Teacher II", hire_date=date(2019, 6, 1)),
    make_record(
        "E3",
        "Carla",
        "Anacleto",
        department="Mathematics",
        position="Head Teacher",
        hire_date=date(2000, 6, 1),
        status=EmploymentStatus.RETIRED,
    ),
    make_record("E4", "Dan", "Cruz", department="Science", position="Teacher I", hire_date=None),
]


def ids(records):
    return [r.employee_id for r in records]


def test_empty_criteria_match_everything():
    assert ids(filter_records(RECORDS, DirectoryCriteria(), today=TODAY)) == ["E1", "E2", "E3", "E4"]


def test_name_is_case_insensitive_substring_of_first_and_last():
    assert ids(filter_records(RECORDS, DirectoryCriteria(name="ANA"), today=TODAY)) == ["E1", "E3"]
    assert ids(filter_records(RECORDS, DirectoryCriteria(name="ben san"), today=TODAY)) == ["E2"]


def test_department_and_position_are_exact():
    assert ids(filter_records(RECORDS, DirectoryCriteria(department="Math"), today=TODAY)) == []
    assert ids(filter_records(RECORDS, DirectoryCriteria(position="Teacher I"), today=TODAY)) == ["E1", "E4"]


def test_status_filter():
    criteria = DirectoryCriteria(status=EmploymentStatus.RETIRED)
    assert ids(filter_records(RECORDS, criteria, today=TODAY)) == ["E3"]


@pytest.mark.parametrize(
    "bucket, expected",
    [
        (ServiceBucket.UNDER_5, ["E1"]),
        (ServiceBucket.FROM_5_TO_10, ["E2"]),
        (ServiceBucket.FROM_10_TO_15, []),
        (ServiceBucket.OVER_20, ["E3"]),
    ],
)
def test_years_of_service_buckets(bucket, expected):
    criteria = DirectoryCriteria(years_of_service=bucket)
    assert ids(filter_records(RECORDS, criteria, today=TODAY)) == expected


def test_record_without_hire_date_never_matches_a_bucket():
    no_hire = RECORDS[3]
    for bucket in ServiceBucket:
        assert not matches(no_hire, DirectoryCriteria(years_of_service=bucket), today=TODAY)
    assert matches(no_hire, DirectoryCriteria(), today=TODAY)


def test_bucket_edges_are_half_open():
    assert ServiceBucket.UNDER_5.contains(4)
    assert not ServiceBucket.UNDER_5.contains(5)
    assert ServiceBucket.FROM_5_TO_10.contains(5)
    assert ServiceBucket.OVER_20.contains(45)


@pytest.mark.parametrize(
    "first, second",
    [
        (DirectoryCriteria(name="a"), DirectoryCriteria(department="Mathematics")),
        (DirectoryCriteria(position="Teacher I"), DirectoryCriteria(years_of_service=ServiceBucket.UNDER_5)),
        (DirectoryCriteria(department="Science"), DirectoryCriteria(status=EmploymentStatus.REGULAR)),
        (DirectoryCriteria(name="zzz"), DirectoryCriteria(position="Teacher II")),
    ],
)
def test_merged_criteria_behave_as_and(first, second):
    merged = first.merge(second)
    for record in RECORDS:
        expected = matches(record, first, today=TODAY) and matches(record, second, today=TODAY)
        assert matches(record, merged, today=TODAY) == expected


def test_criteria_from_query_params():
    criteria = DirectoryCriteria.from_params(
        {"name": " ana ", "department": "Science", "status": "Regular", "yearsOfService": "5-10"}
    )
    assert criteria == DirectoryCriteria(
        name="ana",
        department="Science",
        status=EmploymentStatus.REGULAR,
        years_of_service=ServiceBucket.FROM_5_TO_10,
    )
    assert DirectoryCriteria.from_params({}) == DirectoryCriteria()


def test_criteria_from_query_params_rejects_unknown_values():
    with pytest.raises(ValidationError):
        DirectoryCriteria.from_params({"status": "Fired"})
    with pytest.raises(ValidationError) as exc:
        DirectoryCriteria.from_params({"yearsOfService": "3-4"})
    assert "yearsOfService" in exc.value.field_errors
