"""PositionMapper — date to pixel offset on a column axis.

Bars snap to whole columns: a start date maps to the left edge of its
column and an end date to the right edge. Sub-column precision is given up
on purpose so bars line up with the grid.
"""

from __future__ import annotations

from datetime import date

from auditline.domain.entities.timeline import Column


def find_column(day: date, columns: list[Column]) -> int | None:
    """Index of the column whose [start, end] contains *day*."""
    for index, column in enumerate(columns):
        if column.contains(day):
            return index
    return None


def map_position(day: date, columns: list[Column], snap_to_end: bool = False) -> int:
    """Pixel offset of *day* on the axis.

    Before the first column → 0; after the last → ``len(columns) * width``,
    i.e. just off the right edge.
    """
    if not columns:
        return 0

    index = find_column(day, columns)
    if index is not None:
        column = columns[index]
        left = index * column.width
        return left + column.width if snap_to_end else left

    if day < columns[0].start:
        return 0
    if day > columns[-1].end:
        return len(columns) * columns[-1].width
    return 0
