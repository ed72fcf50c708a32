"""NameNormalizer — canonical matching key for a raw auditor name token."""

from __future__ import annotations

import re

# Indonesian academic degrees that show up as standalone tokens when a
# "Name, S.E., M.M." string is split on commas.
ACADEMIC_TITLES: frozenset[str] = frozenset(
    t.casefold()
    for t in (
        "S.E", "S.E.", "SE",
        "S.Kom", "S.Kom.", "S.Ko",
        "S.H", "S.H.", "SH",
        "S.Ak", "S.Ak.", "SAk",
        "S.Tr.Akun", "S.Tr.Akun.", "S.Tr", "S.Tr.",
        "M.M", "M.M.", "MM", "M.Ak", "M.Ak.",
        "Ak", "Ak.", "CA", "CPA", "BKP",
        "S.T", "S.T.", "ST",
        "S.Si", "S.Si.", "SSi",
        "S.Pd", "S.Pd.", "SPd",
        "S.Sos", "S.Sos.", "SSos",
        "S.I.Kom", "S.I.Kom.",
        "A.Md", "A.Md.", "AMD", "Amd",
        "M.Si", "M.Si.", "MSi",
        "M.Pd", "M.Pd.", "MPd",
        "Dr", "Dr.", "Drs", "Drs.", "Dra", "Dra.",
        "Ir", "Ir.", "Prof", "Prof.",
    )
)

MIN_NAME_LENGTH = 3

_WHITESPACE = re.compile(r"\s+")


def clean_display_name(raw: str) -> str:
    """Trim and collapse whitespace, keeping the original casing."""
    return _WHITESPACE.sub(" ", raw).strip()


def is_excluded(cleaned: str) -> bool:
    """True for tokens that must never become an auditor (titles, initials)."""
    return len(cleaned) < MIN_NAME_LENGTH or cleaned.casefold() in ACADEMIC_TITLES


def normalize_name(raw: str | None) -> str | None:
    """Return the matching key for *raw*, or None when it is not a name.

    - Strips leading/trailing whitespace
    - Collapses runs of whitespace (incl. non-breaking spaces) to one space
    - Casefolds
    - Excludes academic titles ("S.E.", "Dr.") and tokens of length <= 2

    Total and idempotent: never raises, and normalizing a key again
    yields the same key.
    """
    if not isinstance(raw, str):
        return None
    cleaned = clean_display_name(raw)
    if is_excluded(cleaned):
        return None
    return cleaned.casefold()
