"""AssignmentExtractor — turn letters and addendums into per-auditor assignments."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from auditline.domain.entities.assignment import Assignment
from auditline.domain.entities.source import Addendum, Letter, Source
from auditline.domain.policies.entity_resolver import EntityResolver
from auditline.domain.value_objects.date_range import DateRange

logger = logging.getLogger(__name__)

ADDENDUM_SUFFIX = " (Addendum)"
MISSING_LETTER_NO = "-"


@dataclass
class ExtractionResult:
    """Assignments of one data snapshot, grouped by auditor id."""

    resolver: EntityResolver
    assignments: dict[int, list[Assignment]] = field(default_factory=dict)
    skipped: int = 0

    def add(self, assignment: Assignment) -> None:
        self.assignments.setdefault(assignment.auditor_id, []).append(assignment)

    def by_auditor(self) -> list[tuple[str, list[Assignment]]]:
        """(display name, assignments) pairs sorted alphabetically by name."""
        rows = []
        for auditor_id, items in self.assignments.items():
            auditor = self.resolver.get(auditor_id)
            rows.append((auditor.display_name, items))
        return sorted(rows, key=lambda r: r[0].casefold())


def parse_team(raw: str | None) -> list[str]:
    """Parse a free-text team field into member names.

    Accepts a JSON array ('["Budi", "Ani"]'), a comma list ('Budi, Ani')
    or a single name. Never raises: malformed JSON falls back to the comma
    split, and a string with no separator is one name.
    """
    if not raw or not raw.strip():
        return []
    text = raw.strip()

    if text.startswith("[") or text.startswith("{"):
        try:
            parsed = json.loads(text)
        except (ValueError, TypeError):
            parsed = None
        if isinstance(parsed, list):
            return [p.strip() for p in parsed if isinstance(p, str) and p.strip()]
        if parsed is not None:
            return [text]
        # Broken JSON: drop the brackets/quotes and split like a plain list
        text = text.strip("[]{}")
        parts = [p.strip().strip("\"'").strip() for p in text.split(",")]
        return [p for p in parts if p]

    parts = [p.strip() for p in text.split(",")]
    return [p for p in parts if p]


def team_members(source: Source) -> list[str]:
    """Team plus leader, de-duplicated, in first-seen order."""
    if isinstance(source, Addendum):
        team, leader = source.effective_team(), source.effective_leader()
    else:
        team, leader = source.team, source.leader

    members = parse_team(team)
    if leader and leader.strip():
        members.append(leader.strip())
    return list(dict.fromkeys(m for m in members if m))


def resolve_period(
    source: Source,
    letters_by_no: dict[str, Letter],
) -> tuple[date | None, date | None]:
    """Effective (start, end) of a source.

    An addendum is drawn as a continuation of its parent letter: it starts
    on the day the parent ends. Without a parent (or a parent end date) the
    addendum's own start date is used.
    """
    if isinstance(source, Letter):
        return source.start_date, source.end_date

    start = None
    parent = letters_by_no.get(source.letter_no_before) if source.letter_no_before else None
    if parent is not None and parent.end_date is not None:
        start = parent.end_date
    elif source.letter_no_before:
        logger.debug(
            "Addendum %s: parent letter %r not found, using own start date",
            source.id, source.letter_no_before,
        )
    if start is None:
        start = source.start_date
    return start, source.end_date


def _labels(source: Source) -> tuple[str, str, str | None]:
    """(branch label, letter number, type label) for a source."""
    if isinstance(source, Addendum):
        type_label = f"Addendum: {source.addendum_type}" if source.addendum_type else "Addendum"
        return (
            f"{source.branch_name}{ADDENDUM_SUFFIX}",
            source.addendum_no or MISSING_LETTER_NO,
            type_label,
        )
    return source.branch_name, source.letter_no or MISSING_LETTER_NO, source.audit_type


def extract_assignments(
    letters: Iterable[Letter],
    addendums: Iterable[Addendum],
    resolver: EntityResolver | None = None,
) -> ExtractionResult:
    """Resolve every source into (auditor, interval) assignments.

    Letters are processed before addendums, each in input order. A bad
    record is skipped and logged; it never aborts the remaining ones.
    """
    letters = list(letters)
    addendums = list(addendums)
    result = ExtractionResult(resolver=resolver or EntityResolver())
    letters_by_no = {l.letter_no: l for l in letters if l.letter_no}

    sources: list[Source] = [*letters, *addendums]
    for source in sources:
        if source.is_rejected():
            logger.debug("Skipping rejected %s %s", source.kind.value, source.id)
            result.skipped += 1
            continue

        start, end = resolve_period(source, letters_by_no)
        if start is None or end is None:
            logger.info("Skipping %s %s: missing audit dates", source.kind.value, source.id)
            result.skipped += 1
            continue
        if not DateRange(start, end).is_valid():
            logger.info(
                "Skipping %s %s: start %s after end %s",
                source.kind.value, source.id, start, end,
            )
            result.skipped += 1
            continue

        branch_label, letter_no, type_label = _labels(source)
        seen: set[int] = set()
        for member in team_members(source):
            auditor = result.resolver.resolve(member)
            if auditor is None or auditor.id in seen:
                continue
            seen.add(auditor.id)
            result.add(
                Assignment(
                    auditor_id=auditor.id,
                    source_id=source.id,
                    branch_label=branch_label,
                    letter_no=letter_no,
                    type_label=type_label,
                    start=start,
                    end=end,
                    status=source.status,
                    is_addendum=isinstance(source, Addendum),
                )
            )

    logger.info(
        "Extracted assignments for %d auditors from %d letters / %d addendums (%d skipped)",
        len(result.assignments), len(letters), len(addendums), result.skipped,
    )
    return result
