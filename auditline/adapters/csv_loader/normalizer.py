"""CSV / row value normalization — BOM, trailing spaces, date formats."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime

logger = logging.getLogger(__name__)

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%d.%m.%Y",
    "%d/%m/%Y",
    "%d-%m-%Y",
)


def normalize_column_name(name: str) -> str:
    """Header cell → snake_case key ("\\ufeffAudit Start Date " → "audit_start_date").

    Spreadsheet exports carry a BOM on the first header, trailing blanks and
    non-breaking spaces; punctuation such as "No. Surat" is dropped.
    """
    name = name.replace("\ufeff", "").strip()
    name = re.sub(r"[\s\u00a0]+", "_", name).lower()
    return re.sub(r"[^\w]", "", name, flags=re.UNICODE)


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def parse_date(raw: str | None) -> date | None:
    """Parse dates in the formats the dashboard exports; None if unparseable."""
    if not raw or not raw.strip():
        return None
    value = raw.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    try:
        # ISO timestamps with offsets, e.g. "2024-01-10T00:00:00+07:00"
        return datetime.fromisoformat(value).date()
    except ValueError:
        logger.warning("Could not parse date: %s", raw)
        return None


def coerce_date(value: date | datetime | str | None) -> date | None:
    """Date column values may arrive as date, datetime or text."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(str(value))
