"""RowPacking — lay overlapping assignments of one auditor into rows.

First-fit greedy interval colouring: each assignment goes to the lowest row
that holds nothing overlapping it. Input order is kept unless *presort* is
set, so the result matches what users already see on the dashboard; sorting
by start gives the minimal number of rows.
"""

from __future__ import annotations

from datetime import date

from auditline.domain.entities.assignment import Assignment
from auditline.domain.entities.timeline import AuditorTrack, Column, LayoutBar
from auditline.domain.policies.position_mapper import map_position

MIN_BAR_WIDTH = 10
SINGLE_ROW_HEIGHT = 32.0
MIN_ROW_HEIGHT = 20.0
STACKED_HEIGHT_BUDGET = 40.0
ROW_GAP = 4
TRACK_PADDING = 8
MIN_TRACK_HEIGHT = 50.0


def visible_assignments(
    assignments: list[Assignment],
    view_start: date,
    view_end: date,
) -> list[Assignment]:
    return [a for a in assignments if a.is_visible_in(view_start, view_end)]


def pack_rows(
    assignments: list[Assignment],
    presort: bool = False,
) -> list[tuple[Assignment, int]]:
    """Assign each assignment the first row where it overlaps nothing.

    Returns (assignment, row) pairs in processing order.
    """
    ordered = sorted(assignments, key=lambda a: (a.start, a.end)) if presort else assignments
    rows: list[list[Assignment]] = []
    placed: list[tuple[Assignment, int]] = []

    for assignment in ordered:
        row = 0
        while row < len(rows) and any(assignment.overlaps(prev) for prev in rows[row]):
            row += 1
        if row == len(rows):
            rows.append([])
        rows[row].append(assignment)
        placed.append((assignment, row))

    return placed


def row_metrics(row_count: int) -> tuple[float, float]:
    """(row height, track height) in px; rows shrink as overlap grows."""
    row_count = max(1, row_count)
    if row_count > 1:
        row_height = max(MIN_ROW_HEIGHT, STACKED_HEIGHT_BUDGET / row_count)
    else:
        row_height = SINGLE_ROW_HEIGHT
    track_height = max(MIN_TRACK_HEIGHT, row_count * (row_height + ROW_GAP) + TRACK_PADDING)
    return row_height, track_height


def layout_track(
    auditor: str,
    assignments: list[Assignment],
    columns: list[Column],
    total_width: int,
    presort: bool = False,
) -> AuditorTrack | None:
    """Packed, positioned bars for one auditor, or None if nothing is visible."""
    if not columns:
        return None
    visible = visible_assignments(assignments, columns[0].start, columns[-1].end)
    if not visible:
        return None

    placed = pack_rows(visible, presort=presort)
    row_count = max(row for _, row in placed) + 1
    row_height, track_height = row_metrics(row_count)

    bars = []
    for assignment, row in placed:
        left = map_position(assignment.start, columns, snap_to_end=False)
        right = map_position(assignment.end, columns, snap_to_end=True)
        width = min(max(MIN_BAR_WIDTH, right - left), total_width - left)
        if width <= 0:
            continue
        bars.append(
            LayoutBar(
                assignment=assignment,
                row=row,
                left_px=left,
                width_px=width,
                top_px=ROW_GAP + row * (row_height + ROW_GAP),
                height_px=row_height,
            )
        )

    return AuditorTrack(
        auditor=auditor,
        bars=bars,
        row_count=row_count,
        row_height=row_height,
        track_height=track_height,
    )
