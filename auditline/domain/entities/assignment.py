"""Assignment entity — one auditor working one letter/addendum over a date range."""

from dataclasses import dataclass
from datetime import date

from auditline.domain.value_objects.date_range import DateRange
from auditline.domain.value_objects.enums import BarTone

# Audit types drawn with the "special" tone (fraud / investigation work)
SPECIAL_TYPE_MARKERS = ("fraud", "special", "investigasi", "khusus")


@dataclass(frozen=True)
class Assignment:
    auditor_id: int
    source_id: int
    branch_label: str
    letter_no: str
    type_label: str | None
    start: date
    end: date
    status: str | None
    is_addendum: bool = False

    @property
    def period(self) -> DateRange:
        return DateRange(self.start, self.end)

    def overlaps(self, other: "Assignment") -> bool:
        return self.period.overlaps(other.period)

    def is_visible_in(self, view_start: date, view_end: date) -> bool:
        return self.period.overlaps(DateRange(view_start, view_end))

    @property
    def tone(self) -> BarTone:
        label = (self.type_label or "").lower()
        if any(marker in label for marker in SPECIAL_TYPE_MARKERS):
            return BarTone.SPECIAL
        return BarTone.REGULAR
