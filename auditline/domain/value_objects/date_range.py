"""DateRange value object — immutable closed [start, end] day interval."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def is_valid(self) -> bool:
        return self.start <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        """Closed-interval intersection: touching endpoints count as overlap."""
        return not (self.end < other.start or self.start > other.end)
