from __future__ import annotations

from datetime import date

from src.school_hrms.school_hrms.core.enums import AccountStatus, EmploymentStatus
from src.school_hrms.school_hrms.directory.normalize import as_list, record_from_row


def test_as_list_folds_every_shape():
    assert as_list(None) == []
    assert as_list({"a": 1}) == [{"a": 1}]
    assert as_list([{"a": 1}, None]) == [{"a": 1}]


def test_related_rows_as_list_dict_or_missing_give_the_same_record():
    employment = {"employment_status": "Regular", "hire_date": "2019-06-01"}
    base = {"employee_id": "E1", "first_name": "Ana", "last_name": "Reyes", "department": "Science"}

    as_dict = record_from_row({**base, "employment": employment})
    as_rows = record_from_row({**base, "employment": [employment, {"employment_status": "Hired"}]})

    assert as_dict == as_rows
    assert as_dict.employment_status == EmploymentStatus.REGULAR
    assert as_dict.hire_date == date(2019, 6, 1)

    missing = record_from_row(base)
    assert missing.employment is None
    assert missing.hire_date is None


def test_backend_style_keys_are_accepted():
    row = {
        "EmployeeID": "2024-0001",
        "FirstName": "Ben",
        "LastName": "Santos",
        "Position": "Teacher II",
        "department": [{"DepartmentName": "Science"}],
        "ContactInfo": [{"Email": "ben@school.ph", "Phone": "09171234567"}],
        "EmploymentDetail": {"EmploymentStatus": "Part_Time", "HireDate": "2020-01-15T00:00:00.000Z"},
        "User": [{"Status": "Inactive"}],
    }
    record = record_from_row(row)
    assert record.employee_id == "2024-0001"
    assert record.department == "Science"
    assert record.contact.email == "ben@school.ph"
    assert record.employment_status == EmploymentStatus.PART_TIME
    assert record.hire_date == date(2020, 1, 15)
    assert record.account_status == AccountStatus.INACTIVE


def test_separation_before_hire_is_dropped(caplog):
    row = {
        "employee_id": "E1",
        "employment": {"hire_date": "2020-01-01", "resignation_date": "2019-01-01", "employment_status": "Resigned"},
    }
    with caplog.at_level("WARNING"):
        record = record_from_row(row)
    assert record.hire_date == date(2020, 1, 1)
    assert record.employment.resignation_date is None
    assert record.employment_status == EmploymentStatus.RESIGNED
    assert "separation date" in caplog.text


def test_malformed_values_do_not_raise():
    record = record_from_row(
        {"employee_id": 7, "employment": {"hire_date": "yesterday", "employment_status": "Unknown"}}
    )
    assert record.employee_id == "7"
    assert record.hire_date is None
    assert record.employment_status is None
