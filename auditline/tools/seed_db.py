"""Seed database from CSV exports of the letter / addendum tables.

Usage:
    python -m auditline.tools.seed_db
    python -m auditline.tools.seed_db --data-dir data
    python -m auditline.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from auditline.adapters.csv_loader.loader import load_addendums, load_letters
from auditline.adapters.persistence.database import async_session_factory
from auditline.adapters.persistence.models import AddendumModel, LetterModel
from auditline.adapters.persistence.repositories import (
    SqlAddendumRepository,
    SqlLetterRepository,
)
from auditline.config import settings
from auditline.domain.policies.assignment_extractor import extract_assignments

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def _drop_data(session: AsyncSession) -> None:
    """Delete all data (addendums reference letters by number)."""
    for model in [AddendumModel, LetterModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


async def seed(data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records.

    Safe to re-run: rows already present (by number, or by content when the
    number is blank) are skipped. CSV ids are not inserted, so the table
    sequences keep numbering new rows.
    """
    counts = {"letters": 0, "addendums": 0}

    letter_csv = _find_csv(data_dir, ["letters", "letter", "surat_tugas", "surat"])
    addendum_csv = _find_csv(data_dir, ["addendums", "addendum", "adendum"])

    if not letter_csv:
        raise FileNotFoundError(
            f"No letters CSV found in {data_dir}. Expected something like letters.csv"
        )

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        # 1. Letters
        seen = await _existing_letter_keys(session)
        for ld in load_letters(letter_csv):
            key = _letter_key(
                ld["letter_no"], ld["branch_name"], ld["team"],
                ld["audit_start_date"], ld["audit_end_date"],
            )
            if key in seen:
                logger.debug("Letter %s already exists, skipping", key)
                continue
            seen.add(key)
            session.add(LetterModel(
                branch_name=ld["branch_name"],
                letter_no=ld["letter_no"],
                team=ld["team"],
                leader=ld["leader"],
                audit_start_date=ld["audit_start_date"],
                audit_end_date=ld["audit_end_date"],
                audit_type=ld["audit_type"],
                status=ld["status"],
            ))
            counts["letters"] += 1
        await session.commit()

        # 2. Addendums
        if addendum_csv:
            seen = await _existing_addendum_keys(session)
            for ad in load_addendums(addendum_csv):
                key = _addendum_key(
                    ad["addendum_no"], ad["branch_name"], ad["assignment_letter_before"],
                    ad["start_date"], ad["end_date"],
                )
                if key in seen:
                    logger.debug("Addendum %s already exists, skipping", key)
                    continue
                seen.add(key)
                session.add(AddendumModel(
                    branch_name=ad["branch_name"],
                    addendum_no=ad["addendum_no"],
                    assignment_letter_before=ad["assignment_letter_before"],
                    team=ad["team"],
                    leader=ad["leader"],
                    new_team=ad["new_team"],
                    new_leader=ad["new_leader"],
                    start_date=ad["start_date"],
                    end_date=ad["end_date"],
                    addendum_type=ad["addendum_type"],
                    status=ad["status"],
                ))
                counts["addendums"] += 1
            await session.commit()
        else:
            logger.info("No addendums CSV found, skipping addendum import")

    logger.info(
        "Seed complete: %d letters, %d addendums",
        counts["letters"], counts["addendums"],
    )
    return counts


def _letter_key(letter_no, branch_name, team, start, end) -> tuple:
    """Natural key of a letter: its number, or the whole row when unnumbered."""
    if letter_no:
        return ("no", letter_no)
    return ("row", branch_name, team, start, end)


def _addendum_key(addendum_no, branch_name, letter_no_before, start, end) -> tuple:
    if addendum_no:
        return ("no", addendum_no)
    return ("row", branch_name, letter_no_before, start, end)


async def _existing_letter_keys(session: AsyncSession) -> set[tuple]:
    result = await session.execute(select(
        LetterModel.letter_no, LetterModel.branch_name, LetterModel.team,
        LetterModel.audit_start_date, LetterModel.audit_end_date,
    ))
    return {_letter_key(*row) for row in result.all()}


async def _existing_addendum_keys(session: AsyncSession) -> set[tuple]:
    result = await session.execute(select(
        AddendumModel.addendum_no, AddendumModel.branch_name,
        AddendumModel.assignment_letter_before,
        AddendumModel.start_date, AddendumModel.end_date,
    ))
    return {_addendum_key(*row) for row in result.all()}


def _find_csv(data_dir: Path, name_hints: list[str]) -> Path | None:
    """Find a CSV file matching any of the name hints (in hint order)."""
    files = sorted(data_dir.glob("*.csv"))
    for hint in name_hints:
        for f in files:
            if hint in f.stem.lower():
                logger.info("Found CSV: %s (matched hint '%s')", f.name, hint)
                return f
    return None


async def _verify_data() -> None:
    """Print sanity checks after seeding, including auditor resolution."""
    async with async_session_factory() as session:
        letters = await SqlLetterRepository(session).get_all()
        addendums = await SqlAddendumRepository(session).get_all()

    letter_nos = {l.letter_no for l in letters if l.letter_no}
    orphans = [a for a in addendums if a.letter_no_before not in letter_nos]
    extraction = extract_assignments(letters, addendums)

    print(f"\n{'='*50}")
    print("SEED VERIFICATION")
    print(f"{'='*50}")
    print(f"Letters:   {len(letters)}")
    print(f"Addendums: {len(addendums)}")
    print(f"Addendums without parent letter: {len(orphans)}")
    print(f"Records skipped by timeline: {extraction.skipped}")
    print(f"Canonical auditors: {len(extraction.assignments)}")
    for auditor in extraction.resolver.auditors():
        variants = sorted(auditor.members - {auditor.key})
        if variants:
            print(f"  {auditor.display_name}  <- {', '.join(variants)}")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed audit timeline database from CSV files")
    parser.add_argument(
        "--data-dir", type=str, default=settings.csv_data_path,
        help="Directory containing CSV files (default: CSV_DATA_PATH)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(data_dir, drop=args.drop)
            await _verify_data()

        asyncio.run(run_all())


if __name__ == "__main__":
    main()
