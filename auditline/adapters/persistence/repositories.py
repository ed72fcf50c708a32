"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from auditline.adapters.csv_loader.normalizer import clean_string, coerce_date
from auditline.adapters.persistence.models import AddendumModel, LetterModel
from auditline.application.ports.letter_repo import AddendumRepository, LetterRepository
from auditline.domain.entities.source import Addendum, Letter

# ─── Mappers ─────────────────────────────────────────────────────────


def _letter_to_domain(m: LetterModel) -> Letter:
    return Letter(
        id=m.id,
        branch_name=clean_string(m.branch_name) or "",
        letter_no=clean_string(m.letter_no),
        team=clean_string(m.team),
        leader=clean_string(m.leader),
        start_date=coerce_date(m.audit_start_date),
        end_date=coerce_date(m.audit_end_date),
        audit_type=clean_string(m.audit_type),
        status=clean_string(m.status),
    )


def _addendum_to_domain(m: AddendumModel) -> Addendum:
    return Addendum(
        id=m.id,
        branch_name=clean_string(m.branch_name) or "",
        addendum_no=clean_string(m.addendum_no),
        letter_no_before=clean_string(m.assignment_letter_before),
        team=clean_string(m.team),
        leader=clean_string(m.leader),
        start_date=coerce_date(m.start_date),
        end_date=coerce_date(m.end_date),
        new_team=clean_string(m.new_team),
        new_leader=clean_string(m.new_leader),
        addendum_type=clean_string(m.addendum_type),
        status=clean_string(m.status),
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlLetterRepository(LetterRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_all(self) -> list[Letter]:
        result = await self._s.execute(select(LetterModel).order_by(LetterModel.id))
        return [_letter_to_domain(m) for m in result.scalars().all()]


class SqlAddendumRepository(AddendumRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_all(self) -> list[Addendum]:
        result = await self._s.execute(select(AddendumModel).order_by(AddendumModel.id))
        return [_addendum_to_domain(m) for m in result.scalars().all()]
