"""CSV loader — reads and normalizes letter / addendum exports."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from auditline.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_date,
)

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Detect the delimiter (comma/semicolon/tab); spreadsheet exports often use ';'."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    delims = [";", ",", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect
    return csv.excel


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts with normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = []
        for raw_row in reader:
            row = {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            rows.append(row)

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def _first(row: dict[str, str | None], *names: str) -> str | None:
    for name in names:
        value = clean_string(row.get(name))
        if value:
            return value
    return None


def load_letters(file_path: Path) -> list[dict]:
    """Load and normalize the assignment-letter export.

    Expected columns (after normalization):
        id, branch_name, assigment_letter (letter number), team, leader,
        audit_start_date, audit_end_date, audit_type, status
    """
    letters = []
    for row in _read_csv(file_path):
        letters.append({
            "id": _parse_int(row.get("id")),
            "branch_name": _first(row, "branch_name", "cabang", "nama_cabang") or "",
            "letter_no": _first(row, "assigment_letter", "assignment_letter", "letter_no", "no_surat"),
            "team": _first(row, "team", "tim"),
            "leader": _first(row, "leader", "ketua_tim"),
            "audit_start_date": parse_date(_first(row, "audit_start_date", "audit_period_start")),
            "audit_end_date": parse_date(_first(row, "audit_end_date", "audit_period_end")),
            "audit_type": _first(row, "audit_type", "jenis_audit"),
            "status": _first(row, "status"),
        })
    logger.info("Parsed %d letters", len(letters))
    return letters


def load_addendums(file_path: Path) -> list[dict]:
    """Load and normalize the addendum export.

    Expected columns (after normalization):
        id, branch_name, addendum_letter_no, assignment_letter_before, team,
        leader, new_team, new_leader, start_date, end_date, addendum_type, status
    """
    addendums = []
    for row in _read_csv(file_path):
        addendums.append({
            "id": _parse_int(row.get("id")),
            "branch_name": _first(row, "branch_name", "cabang", "nama_cabang") or "",
            "addendum_no": _first(row, "addendum_letter_no", "addendum_number", "addendum_no"),
            "assignment_letter_before": _first(row, "assignment_letter_before", "assigment_letter"),
            "team": _first(row, "team", "tim"),
            "leader": _first(row, "leader", "ketua_tim"),
            "new_team": _first(row, "new_team"),
            "new_leader": _first(row, "new_leader"),
            "start_date": parse_date(_first(row, "start_date", "new_audit_start_date", "audit_start_date")),
            "end_date": parse_date(_first(row, "end_date", "new_audit_end_date", "audit_end_date")),
            "addendum_type": _first(row, "addendum_type"),
            "status": _first(row, "status"),
        })
    logger.info("Parsed %d addendums", len(addendums))
    return addendums


def _parse_int(value: str | None) -> int | None:
    if not value:
        return None
    try:
        # handle "4", "4.0"
        return int(float(str(value).replace(",", ".").strip()))
    except ValueError:
        return None
