from __future__ import annotations

from datetime import date

import pytest

from conftest import make_record
from src.school_hrms.school_hrms.core.enums import LoadStatus
from src.school_hrms.school_hrms.directory.model import DirectoryCriteria, FilterOptions, PageInfo
from src.school_hrms.school_hrms.directory.view import (
    LOAD_FAILED_MESSAGE,
    DirectoryState,
    DirectoryView,
    FilterChanged,
    PageRequested,
    transition,
)

TODAY = date(2026, 3, 15)


def people(count: int, department: str = "Mathematics"):
    return [make_record(f"E{i}", f"Name{i}", "Reyes", department=department) for i in range(1, count + 1)]


@pytest.fixture
def view() -> DirectoryView:
    v = DirectoryView(page_size=10, clock=lambda: TODAY)
    v.refresh(lambda: people(25))
    return v


def test_refresh_loads_records(view):
    assert view.state.load_status == LoadStatus.READY
    info = view.page_info()
    assert (info.current_page, info.total_pages, info.total_count) == (1, 3, 25)
    assert [r.employee_id for r in view.visible_records()] == [f"E{i}" for i in range(1, 11)]


@pytest.mark.parametrize("requested, expected", [(0, 1), (-3, 1), (3, 3), (8, 3)])
def test_set_page_is_clamped(view, requested, expected):
    view.set_page(requested)
    assert view.state.page == expected
    visible = view.visible_records()
    assert 1 <= len(visible) <= 10


def test_last_page_slice(view):
    view.set_page(view.page_info().total_pages + 5)
    assert [r.employee_id for r in view.visible_records()] == [f"E{i}" for i in range(21, 26)]


def test_filter_change_resets_to_first_page(view):
    view.set_page(3)
    view.set_filter(DirectoryCriteria(name="name2"))
    assert view.state.page == 1
    # Name2, Name20..Name25
    assert view.page_info().total_count == 7


def test_empty_result_still_has_one_page():
    v = DirectoryView(page_size=10, clock=lambda: TODAY)
    v.refresh(lambda: [])
    v.set_page(4)
    assert v.page_info() == PageInfo(current_page=1, total_pages=1, total_count=0, page_size=10)
    assert v.visible_records() == []


def test_failed_fetch_clears_records(view):
    def broken():
        raise ConnectionError("backend down")

    view.set_page(2)
    state = view.refresh(broken)
    assert state.load_status == LoadStatus.FAILED
    assert state.error == LOAD_FAILED_MESSAGE
    assert state.records == ()
    assert view.visible_records() == []


def test_stale_completion_is_discarded():
    v = DirectoryView(page_size=10, clock=lambda: TODAY)
    first = v.begin_fetch()
    second = v.begin_fetch()

    v.complete_fetch(second, people(3, "Science"))
    v.complete_fetch(first, people(20, "Mathematics"))

    assert v.state.latest_request == second
    assert {r.department for r in v.state.records} == {"Science"}
    assert v.page_info().total_count == 3


def test_stale_failure_does_not_wipe_newer_results():
    v = DirectoryView(page_size=10, clock=lambda: TODAY)
    first = v.begin_fetch()
    second = v.begin_fetch()
    v.complete_fetch(second, people(3), FilterOptions(departments=("Mathematics",)))
    v.fail_fetch(first)
    assert v.state.load_status == LoadStatus.READY
    assert len(v.state.records) == 3
    assert v.state.filter_options.departments == ("Mathematics",)


def test_transition_is_pure():
    state = DirectoryState(records=tuple(people(15)), page_size=10)
    moved = transition(state, PageRequested(2), today=TODAY)
    assert state.page == 1
    assert moved.page == 2
    filtered = transition(moved, FilterChanged(DirectoryCriteria(department="Science")), today=TODAY)
    assert filtered.page == 1
    assert moved.criteria == DirectoryCriteria()


def test_export_covers_every_filtered_record(view):
    view.set_filter(DirectoryCriteria(name="Name1"))
    csv_text = view.export_all()
    # header + Name1 + Name10..Name19
    assert len(csv_text.strip().split("\n")) == 12
    assert len(view.visible_records()) == 10


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        DirectoryView(page_size=0)
