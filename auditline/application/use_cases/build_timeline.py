"""BuildTimelineUseCase — snapshot → resolved auditors → packed timeline layout."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Callable, Hashable

from auditline.application.ports.letter_repo import AddendumRepository, LetterRepository
from auditline.domain.entities.source import Addendum, Letter
from auditline.domain.entities.timeline import Column, TimelineLayout
from auditline.domain.policies.assignment_extractor import (
    ExtractionResult,
    extract_assignments,
)
from auditline.domain.policies.row_packing import layout_track
from auditline.domain.policies.time_axis import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_MINIMUM_WIDTH,
    DEFAULT_RANGE_CAP,
    AxisRequest,
    build_columns,
    timeline_width,
)

logger = logging.getLogger(__name__)


class TimelineCache:
    """Caller-owned memo for extraction results and axis columns.

    Both entries are pure functions of their keys, so a hit never changes
    the output. One instance per application; bounded LRU.
    """

    def __init__(self, max_entries: int = 32):
        self._max = max_entries
        self._extractions: OrderedDict[Hashable, ExtractionResult] = OrderedDict()
        self._columns: OrderedDict[Hashable, list[Column]] = OrderedDict()

    def extraction(self, key: Hashable, compute: Callable[[], ExtractionResult]) -> ExtractionResult:
        return self._get_or_compute(self._extractions, key, compute)

    def columns(self, key: Hashable, compute: Callable[[], list[Column]]) -> list[Column]:
        return self._get_or_compute(self._columns, key, compute)

    def clear(self) -> None:
        self._extractions.clear()
        self._columns.clear()

    def _get_or_compute(self, store: OrderedDict, key: Hashable, compute: Callable):
        if key in store:
            store.move_to_end(key)
            return store[key]
        value = compute()
        store[key] = value
        if len(store) > self._max:
            store.popitem(last=False)
        return value


@dataclass(frozen=True)
class LayoutOptions:
    column_width: int = DEFAULT_COLUMN_WIDTH
    minimum_width: int = DEFAULT_MINIMUM_WIDTH
    range_cap: int = DEFAULT_RANGE_CAP
    presort_rows: bool = False


def compute_layout(
    extraction: ExtractionResult,
    columns: list[Column],
    request: AxisRequest,
    options: LayoutOptions,
) -> TimelineLayout:
    """Pack every auditor's visible assignments onto *columns*."""
    total_width = timeline_width(columns, options.column_width, options.minimum_width)
    layout = TimelineLayout(
        mode=request.mode,
        columns=columns,
        total_width=total_width,
        skipped=extraction.skipped,
    )
    for auditor, assignments in extraction.by_auditor():
        track = layout_track(
            auditor, assignments, columns, total_width, presort=options.presort_rows
        )
        if track is not None:
            layout.tracks.append(track)
    return layout


class BuildTimelineUseCase:
    """Fetch the letter/addendum snapshot and lay out the auditor timeline."""

    def __init__(
        self,
        letter_repo: LetterRepository,
        addendum_repo: AddendumRepository,
        cache: TimelineCache | None = None,
        options: LayoutOptions | None = None,
    ):
        self._letters = letter_repo
        self._addendums = addendum_repo
        self._cache = cache or TimelineCache()
        self._options = options or LayoutOptions()

    async def load(self) -> ExtractionResult:
        """Resolve auditors and assignments for the current snapshot."""
        letters = await self._letters.get_all()
        addendums = await self._addendums.get_all()
        return self.extract(letters, addendums)

    def extract(self, letters: list[Letter], addendums: list[Addendum]) -> ExtractionResult:
        key = (tuple(letters), tuple(addendums))
        return self._cache.extraction(key, lambda: extract_assignments(letters, addendums))

    def columns(self, request: AxisRequest, today: date) -> list[Column]:
        key = (request, today, self._options.column_width, self._options.range_cap)
        return self._cache.columns(
            key,
            lambda: build_columns(
                request,
                today,
                column_width=self._options.column_width,
                range_cap=self._options.range_cap,
            ),
        )

    async def execute(self, request: AxisRequest, today: date | None = None) -> TimelineLayout:
        today = today or date.today()
        extraction = await self.load()
        columns = self.columns(request, today)
        layout = compute_layout(extraction, columns, request, self._options)
        logger.info(
            "Timeline %s: %d columns, %d auditors visible, %d records skipped",
            request.mode.value, len(columns), len(layout.tracks), layout.skipped,
        )
        return layout
