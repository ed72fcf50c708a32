"""Tests for ORM → domain mappers."""

from datetime import date, datetime

from auditline.adapters.persistence.models import AddendumModel, LetterModel
from auditline.adapters.persistence.repositories import _addendum_to_domain, _letter_to_domain
from auditline.domain.entities.source import Addendum, Letter


def test_letter_mapper():
    model = LetterModel(
        id=1, branch_name=" Cabang X ", letter_no="ST-001/2024", team='["Budi Santoso"]',
        leader="  ", audit_start_date=date(2024, 1, 10), audit_end_date=datetime(2024, 1, 15, 12, 0),
        audit_type="Regular Audit", status="approved",
    )
    letter = _letter_to_domain(model)
    assert isinstance(letter, Letter)
    assert letter.branch_name == "Cabang X"
    assert letter.leader is None
    assert letter.end_date == date(2024, 1, 15)


def test_addendum_mapper():
    model = AddendumModel(
        id=10, branch_name="Cabang X", addendum_no="ADD-001/2024",
        assignment_letter_before="ST-001/2024", team="Budi Santoso", leader=None,
        new_team="", new_leader="Rina Wati", start_date=None, end_date=date(2024, 1, 20),
        addendum_type="Perpanjangan", status="approved",
    )
    add = _addendum_to_domain(model)
    assert isinstance(add, Addendum)
    assert add.letter_no_before == "ST-001/2024"
    assert add.new_team is None
    assert add.effective_leader() == "Rina Wati"
    assert add.start_date is None


def test_letter_number_uses_legacy_column_name():
    assert LetterModel.__table__.c["assigment_letter"] is not None
    assert AddendumModel.__table__.c["addendum_letter_no"] is not None
