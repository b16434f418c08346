"""Directory browsing state: fetch -> filter -> paginate.

State changes go through ``transition(state, event)``; ``DirectoryView`` is a
small stateful wrapper that owns the current state, hands out fetch request
ids and answers the read-side questions (visible page, metadata, CSV).

Every fetch gets an increasing request id. A completion that does not carry
the most recently issued id is stale and is dropped, so a slow early fetch
can never overwrite newer results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable, Iterable, Optional, Union

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import LoadStatus
from .export import records_to_csv
from .filters import filter_records
from .model import DirectoryCriteria, FilterOptions, PageInfo, Record

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load directory data"


@dataclass(frozen=True)
class DirectoryState:
    records: tuple[Record, ...] = ()
    criteria: DirectoryCriteria = field(default_factory=DirectoryCriteria)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    load_status: LoadStatus = LoadStatus.IDLE
    error: Optional[str] = None
    latest_request: int = 0
    filter_options: FilterOptions = field(default_factory=FilterOptions)


@dataclass(frozen=True)
class FetchStarted:
    request_id: int


@dataclass(frozen=True)
class FetchSucceeded:
    request_id: int
    records: tuple[Record, ...]
    filter_options: Optional[FilterOptions] = None


@dataclass(frozen=True)
class FetchFailed:
    request_id: int
    message: str = LOAD_FAILED_MESSAGE


@dataclass(frozen=True)
class FilterChanged:
    criteria: DirectoryCriteria


@dataclass(frozen=True)
class PageRequested:
    page: int


Event = Union[FetchStarted, FetchSucceeded, FetchFailed, FilterChanged, PageRequested]


def filtered(state: DirectoryState, *, today: date) -> list[Record]:
    return filter_records(state.records, state.criteria, today=today)


def page_info(state: DirectoryState, *, today: date) -> PageInfo:
    return PageInfo.for_count(len(filtered(state, today=today)), state.page_size, state.page)


def transition(state: DirectoryState, event: Event, *, today: date) -> DirectoryState:
    if isinstance(event, FetchStarted):
        return replace(state, latest_request=event.request_id, load_status=LoadStatus.LOADING, error=None)

    if isinstance(event, FetchSucceeded):
        if event.request_id != state.latest_request:
            return state
        new_state = replace(
            state,
            records=tuple(event.records),
            load_status=LoadStatus.READY,
            error=None,
            filter_options=event.filter_options or state.filter_options,
        )
        return replace(new_state, page=page_info(new_state, today=today).current_page)

    if isinstance(event, FetchFailed):
        if event.request_id != state.latest_request:
            return state
        return replace(state, records=(), page=1, load_status=LoadStatus.FAILED, error=event.message)

    if isinstance(event, FilterChanged):
        # Any filter change starts again from the first page.
        return replace(state, criteria=event.criteria, page=1)

    if isinstance(event, PageRequested):
        clamped = PageInfo.for_count(len(filtered(state, today=today)), state.page_size, int(event.page)).current_page
        return replace(state, page=clamped)

    raise TypeError(f"Unsupported directory event: {event!r}")


class DirectoryView:
    def __init__(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        criteria: Optional[DirectoryCriteria] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._state = DirectoryState(page_size=page_size, criteria=criteria or DirectoryCriteria())
        self._clock = clock or (lambda: now_local().date())
        self._next_request = 0

    @property
    def state(self) -> DirectoryState:
        return self._state

    def dispatch(self, event: Event) -> DirectoryState:
        self._state = transition(self._state, event, today=self._clock())
        return self._state

    def begin_fetch(self) -> int:
        self._next_request += 1
        self.dispatch(FetchStarted(self._next_request))
        return self._next_request

    def complete_fetch(
        self, request_id: int, records: Iterable[Record], filter_options: Optional[FilterOptions] = None
    ) -> DirectoryState:
        return self.dispatch(FetchSucceeded(request_id, tuple(records), filter_options))

    def fail_fetch(self, request_id: int, message: str = LOAD_FAILED_MESSAGE) -> DirectoryState:
        return self.dispatch(FetchFailed(request_id, message))

    def refresh(
        self,
        source: Callable[[], Iterable[Record]],
        options: Optional[Callable[[], FilterOptions]] = None,
    ) -> DirectoryState:
        """Fetch synchronously from ``source`` (and ``options``); failures leave an empty, failed view."""
        request_id = self.begin_fetch()
        try:
            records = list(source())
            filter_options = options() if options else None
        except Exception:
            logger.exception("Directory fetch %s failed", request_id)
            return self.fail_fetch(request_id)
        return self.complete_fetch(request_id, records, filter_options)

    def set_filter(self, criteria: DirectoryCriteria) -> DirectoryState:
        return self.dispatch(FilterChanged(criteria))

    def set_page(self, page: int) -> DirectoryState:
        return self.dispatch(PageRequested(page))

    def filtered_records(self) -> list[Record]:
        return filtered(self._state, today=self._clock())

    def page_info(self) -> PageInfo:
        return page_info(self._state, today=self._clock())

    def visible_records(self) -> list[Record]:
        info = self.page_info()
        return self.filtered_records()[info.start:info.end]

    def export_all(self) -> str:
        """CSV of every filtered record, ignoring pagination."""
        return records_to_csv(self.filtered_records())
