"""Timeline endpoints — auditor timeline layout + resolved auditor list."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from auditline.application.use_cases.build_timeline import BuildTimelineUseCase
from auditline.domain.entities.timeline import AuditorTrack, Column, LayoutBar, TimelineLayout
from auditline.domain.policies.time_axis import AxisRequest
from auditline.domain.value_objects.enums import ViewMode
from auditline.infrastructure.api.dependencies import get_build_timeline_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["timeline"])


@router.get("/timeline")
async def get_timeline(
    mode: ViewMode = ViewMode.MONTH,
    year: int | None = Query(default=None, ge=1, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
    start: str | None = Query(default=None, description="Range start, YYYY-MM-DD"),
    end: str | None = Query(default=None, description="Range end, YYYY-MM-DD"),
    uc: BuildTimelineUseCase = Depends(get_build_timeline_uc),
):
    """Columns + packed per-auditor bars for the requested view.

    Invalid or inverted range bounds fall back to the current month.
    """
    request = AxisRequest(mode=mode, year=year, month=month, range_start=start, range_end=end)
    try:
        layout = await uc.execute(request, today=date.today())
    except Exception as e:
        logger.exception("Error building timeline for %s", request)
        raise HTTPException(status_code=500, detail=str(e))
    return _serialize_layout(layout)


@router.get("/auditors")
async def list_auditors(uc: BuildTimelineUseCase = Depends(get_build_timeline_uc)):
    """Canonical auditors with the name variants merged into each of them."""
    try:
        extraction = await uc.load()
    except Exception as e:
        logger.exception("Error resolving auditors")
        raise HTTPException(status_code=500, detail=str(e))

    auditors = sorted(extraction.resolver.auditors(), key=lambda a: a.display_name.casefold())
    return {
        "total": len(auditors),
        "skipped_records": extraction.skipped,
        "auditors": [
            {
                "id": a.id,
                "name": a.display_name,
                "variants": sorted(a.members),
                "assignments": len(extraction.assignments.get(a.id, [])),
            }
            for a in auditors
        ],
    }


def _serialize_layout(layout: TimelineLayout) -> dict:
    return {
        "mode": layout.mode.value,
        "total_width": layout.total_width,
        "is_empty": layout.is_empty,
        "skipped": layout.skipped,
        "columns": [_serialize_column(c) for c in layout.columns],
        "tracks": [_serialize_track(t) for t in layout.tracks],
    }


def _serialize_column(c: Column) -> dict:
    return {
        "id": c.id,
        "label": c.label,
        "sub_label": c.sub_label,
        "start": c.start.isoformat(),
        "end": c.end.isoformat(),
        "width": c.width,
        "is_weekend": c.is_weekend,
        "is_first_of_period": c.is_first_of_period,
    }


def _serialize_track(t: AuditorTrack) -> dict:
    return {
        "auditor": t.auditor,
        "row_count": t.row_count,
        "row_height": t.row_height,
        "track_height": t.track_height,
        "bars": [_serialize_bar(b) for b in t.bars],
    }


def _serialize_bar(b: LayoutBar) -> dict:
    a = b.assignment
    return {
        "source_id": a.source_id,
        "branch": a.branch_label,
        "letter_no": a.letter_no,
        "type": a.type_label,
        "status": a.status,
        "is_addendum": a.is_addendum,
        "tone": a.tone.value,
        "start": a.start.isoformat(),
        "end": a.end.isoformat(),
        "row": b.row,
        "left_px": b.left_px,
        "width_px": b.width_px,
        "top_px": b.top_px,
        "height_px": b.height_px,
    }
