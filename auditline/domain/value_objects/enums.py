"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class ViewMode(str, Enum):
    MONTH = "month"
    YEAR = "year"
    RANGE = "range"


class SourceKind(str, Enum):
    LETTER = "letter"
    ADDENDUM = "addendum"


class BarTone(str, Enum):
    REGULAR = "regular"
    SPECIAL = "special"
