"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from auditline.domain.entities.source import Addendum, Letter


@pytest.fixture
def letter_a() -> Letter:
    return Letter(
        id=1,
        branch_name="Cabang X",
        letter_no="ST-001/2024",
        team='["Budi Santoso","Ani"]',
        leader="Budi Santoso",
        start_date=date(2024, 1, 10),
        end_date=date(2024, 1, 15),
        audit_type="Regular Audit",
        status="approved",
    )


@pytest.fixture
def addendum_a() -> Addendum:
    return Addendum(
        id=10,
        branch_name="Cabang X",
        addendum_no="ADD-001/2024",
        letter_no_before="ST-001/2024",
        team='["Budi Santoso","Ani"]',
        leader="Budi Santoso",
        start_date=date(2024, 1, 16),
        end_date=date(2024, 1, 20),
        addendum_type="Perpanjangan",
        status="approved",
    )
