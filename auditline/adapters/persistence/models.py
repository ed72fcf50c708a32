"""SQLAlchemy ORM models — maps to the PostgreSQL letter / addendum tables."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from auditline.adapters.persistence.database import Base


class LetterModel(Base):
    __tablename__ = "letter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    branch_name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Column name carries the historical spelling used by the dashboard
    letter_no: Mapped[str | None] = mapped_column("assigment_letter", String(100), nullable=True)
    team: Mapped[str | None] = mapped_column(Text, nullable=True)
    leader: Mapped[str | None] = mapped_column(String(200), nullable=True)
    audit_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    audit_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    audit_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str | None] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("idx_letter_assigment_letter", "assigment_letter"),)


class AddendumModel(Base):
    __tablename__ = "addendum"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    branch_name: Mapped[str] = mapped_column(String(200), nullable=False)
    addendum_no: Mapped[str | None] = mapped_column("addendum_letter_no", String(100), nullable=True)
    assignment_letter_before: Mapped[str | None] = mapped_column(String(100), nullable=True)
    team: Mapped[str | None] = mapped_column(Text, nullable=True)
    leader: Mapped[str | None] = mapped_column(String(200), nullable=True)
    new_team: Mapped[str | None] = mapped_column(Text, nullable=True)
    new_leader: Mapped[str | None] = mapped_column(String(200), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    addendum_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str | None] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("idx_addendum_letter_before", "assignment_letter_before"),)
