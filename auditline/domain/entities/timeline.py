"""Timeline layout entities — axis columns, packed bars, per-auditor tracks."""

from dataclasses import dataclass, field
from datetime import date

from auditline.domain.entities.assignment import Assignment
from auditline.domain.value_objects.enums import ViewMode


@dataclass(frozen=True)
class Column:
    """One discretized unit of the time axis (a day or a week bucket).

    ``end`` is inclusive: a daily column has ``start == end``.
    """

    id: str
    label: str
    start: date
    end: date
    width: int
    sub_label: str | None = None
    is_weekend: bool = False
    is_first_of_period: bool = False

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class LayoutBar:
    assignment: Assignment
    row: int
    left_px: int
    width_px: int
    top_px: float = 0.0
    height_px: float = 0.0


@dataclass
class AuditorTrack:
    auditor: str
    bars: list[LayoutBar] = field(default_factory=list)
    row_count: int = 1
    row_height: float = 32.0
    track_height: float = 50.0


@dataclass
class TimelineLayout:
    mode: ViewMode
    columns: list[Column]
    total_width: int
    tracks: list[AuditorTrack] = field(default_factory=list)
    skipped: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.tracks
