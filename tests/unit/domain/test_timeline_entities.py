"""Tests for domain entities and value objects."""

from datetime import date

from auditline.domain.entities.assignment import Assignment
from auditline.domain.entities.auditor import Auditor
from auditline.domain.entities.source import Addendum, Letter
from auditline.domain.entities.timeline import Column, TimelineLayout
from auditline.domain.value_objects.date_range import DateRange
from auditline.domain.value_objects.enums import BarTone, SourceKind, ViewMode


def _assignment(type_label):
    return Assignment(
        auditor_id=1, source_id=1, branch_label="Cabang X", letter_no="ST-1",
        type_label=type_label, start=date(2024, 1, 1), end=date(2024, 1, 2), status=None,
    )


# ─── DateRange ───────────────────────────────────────────────────────


def test_date_range_overlap_is_closed():
    a = DateRange(date(2024, 1, 1), date(2024, 1, 5))
    assert a.overlaps(DateRange(date(2024, 1, 5), date(2024, 1, 9)))
    assert not a.overlaps(DateRange(date(2024, 1, 6), date(2024, 1, 9)))


def test_date_range_validity():
    assert DateRange(date(2024, 1, 1), date(2024, 1, 1)).is_valid() is True
    assert DateRange(date(2024, 2, 1), date(2024, 1, 1)).is_valid() is False


# ─── Sources ─────────────────────────────────────────────────────────


def test_source_kinds_and_rejection(letter_a, addendum_a):
    assert letter_a.kind == SourceKind.LETTER
    assert addendum_a.kind == SourceKind.ADDENDUM
    assert Letter(2, "B", None, None, None, None, None, status=" REJECTED ").is_rejected()
    assert not letter_a.is_rejected()


def test_addendum_effective_team_falls_back():
    add = Addendum(3, "B", "ADD", None, "Ani", "Budi", None, None, new_team="", new_leader=None)
    assert add.effective_team() == "Ani"
    assert add.effective_leader() == "Budi"


# ─── Assignment / Auditor ────────────────────────────────────────────


def test_assignment_tone():
    assert _assignment("Audit Fraud").tone == BarTone.SPECIAL
    assert _assignment("Pemeriksaan Khusus").tone == BarTone.SPECIAL
    assert _assignment("Regular Audit").tone == BarTone.REGULAR
    assert _assignment(None).tone == BarTone.REGULAR


def test_auditor_rename_keeps_members():
    auditor = Auditor(id=1, display_name="Andre", key="andre", members={"andre"})
    auditor.rename("Andre Perkasa", "andre perkasa")
    assert auditor.first_token == "andre"
    assert auditor.members == {"andre", "andre perkasa"}


# ─── Timeline ────────────────────────────────────────────────────────


def test_column_contains_inclusive_end():
    col = Column(id="2024-01-M4", label="M4", start=date(2024, 1, 22), end=date(2024, 1, 31), width=40)
    assert col.contains(date(2024, 1, 31))
    assert not col.contains(date(2024, 2, 1))


def test_layout_is_empty():
    assert TimelineLayout(mode=ViewMode.MONTH, columns=[], total_width=1000).is_empty
