"""Assignment sources — audit letters and the addendums that amend them.

A source is a tagged union ``Letter | Addendum``. Both variants are frozen
snapshots handed over by the data layer; the timeline engine never mutates
them. Dates are already parsed at the boundary: ``None`` means the value was
missing or unparseable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from auditline.domain.value_objects.enums import SourceKind

REJECTED_STATUS = "rejected"


@dataclass(frozen=True)
class Letter:
    id: int
    branch_name: str
    letter_no: str | None
    team: str | None
    leader: str | None
    start_date: date | None
    end_date: date | None
    audit_type: str | None = None
    status: str | None = None

    @property
    def kind(self) -> SourceKind:
        return SourceKind.LETTER

    def is_rejected(self) -> bool:
        return (self.status or "").strip().lower() == REJECTED_STATUS


@dataclass(frozen=True)
class Addendum:
    id: int
    branch_name: str
    addendum_no: str | None
    letter_no_before: str | None
    team: str | None
    leader: str | None
    start_date: date | None
    end_date: date | None
    new_team: str | None = None
    new_leader: str | None = None
    addendum_type: str | None = None
    status: str | None = None

    @property
    def kind(self) -> SourceKind:
        return SourceKind.ADDENDUM

    def is_rejected(self) -> bool:
        return (self.status or "").strip().lower() == REJECTED_STATUS

    def effective_team(self) -> str | None:
        """The amended team replaces the original one when it is filled in."""
        return self.new_team or self.team

    def effective_leader(self) -> str | None:
        return self.new_leader or self.leader


Source = Union[Letter, Addendum]
