"""Tests for the assignment extractor (team parsing, addendum chaining, skips)."""

from dataclasses import replace
from datetime import date

from auditline.domain.entities.source import Letter
from auditline.domain.policies.assignment_extractor import (
    extract_assignments,
    parse_team,
    resolve_period,
    team_members,
)


def _letter(lid: int = 1, **kw) -> Letter:
    data = dict(
        id=lid, branch_name="Cabang Y", letter_no=f"ST-{lid:03d}",
        team="Rina Wati", leader=None,
        start_date=date(2024, 2, 1), end_date=date(2024, 2, 10),
        audit_type="Regular", status="approved",
    )
    data.update(kw)
    return Letter(**data)


def _names(result) -> list[str]:
    return [name for name, _ in result.by_auditor()]


# ─── parse_team ──────────────────────────────────────────────────────


def test_parse_team_json_array():
    assert parse_team('["Budi Santoso", "Ani"]') == ["Budi Santoso", "Ani"]


def test_parse_team_comma_list():
    assert parse_team("Budi Santoso, Ani ,Rina") == ["Budi Santoso", "Ani", "Rina"]


def test_parse_team_single_name():
    assert parse_team("Budi Santoso") == ["Budi Santoso"]


def test_parse_team_malformed_json_falls_back_to_comma_split():
    assert parse_team('["Budi Santoso", "Ani"') == ["Budi Santoso", "Ani"]


def test_parse_team_json_object_is_one_name():
    assert parse_team('{"name": "Budi"}') == ['{"name": "Budi"}']


def test_parse_team_skips_non_string_items():
    assert parse_team('["Budi", 7, null, " "]') == ["Budi"]


def test_parse_team_empty():
    assert parse_team(None) == []
    assert parse_team("   ") == []
    assert parse_team(",, ,") == []


# ─── team_members ────────────────────────────────────────────────────


def test_team_members_appends_leader_and_dedupes():
    letter = _letter(team='["Budi Santoso","Ani"]', leader="Budi Santoso")
    assert team_members(letter) == ["Budi Santoso", "Ani"]


def test_addendum_prefers_new_team_and_leader(addendum_a):
    amended = replace(addendum_a, new_team="Rina Wati", new_leader="Joko Susilo")
    assert team_members(amended) == ["Rina Wati", "Joko Susilo"]


# ─── resolve_period ──────────────────────────────────────────────────


def test_addendum_starts_at_parent_end(letter_a, addendum_a):
    start, end = resolve_period(addendum_a, {letter_a.letter_no: letter_a})
    assert start == date(2024, 1, 15)
    assert end == date(2024, 1, 20)


def test_orphan_addendum_uses_own_start(addendum_a):
    start, end = resolve_period(addendum_a, {})
    assert start == date(2024, 1, 16)
    assert end == date(2024, 1, 20)


def test_parent_without_end_date_falls_back(letter_a, addendum_a):
    parent = replace(letter_a, end_date=None)
    start, _ = resolve_period(addendum_a, {parent.letter_no: parent})
    assert start == date(2024, 1, 16)


# ─── extract_assignments ─────────────────────────────────────────────


def test_letter_produces_one_assignment_per_member(letter_a):
    result = extract_assignments([letter_a], [])
    assert _names(result) == ["Ani", "Budi Santoso"]
    for _, items in result.by_auditor():
        assert len(items) == 1
        assert items[0].start == date(2024, 1, 10)
        assert items[0].end == date(2024, 1, 15)
        assert items[0].branch_label == "Cabang X"
        assert items[0].letter_no == "ST-001/2024"
        assert items[0].is_addendum is False


def test_addendum_chains_off_parent_letter(letter_a, addendum_a):
    result = extract_assignments([letter_a], [addendum_a])
    for _, items in result.by_auditor():
        assert len(items) == 2
        addendum = items[1]
        assert addendum.is_addendum is True
        assert addendum.start == date(2024, 1, 15)
        assert addendum.end == date(2024, 1, 20)
        assert addendum.branch_label == "Cabang X (Addendum)"
        assert addendum.letter_no == "ADD-001/2024"
        assert addendum.type_label == "Addendum: Perpanjangan"


def test_title_token_contributes_nothing():
    result = extract_assignments([_letter(team="S.E., Budi Santoso")], [])
    assert _names(result) == ["Budi Santoso"]


def test_rejected_records_are_skipped(letter_a):
    result = extract_assignments([replace(letter_a, status="Rejected")], [])
    assert result.assignments == {}
    assert result.skipped == 1


def test_missing_dates_are_skipped(letter_a):
    result = extract_assignments([replace(letter_a, start_date=None), _letter(2)], [])
    assert _names(result) == ["Rina Wati"]
    assert result.skipped == 1


def test_start_after_end_is_skipped():
    bad = _letter(start_date=date(2024, 3, 10), end_date=date(2024, 3, 1))
    result = extract_assignments([bad], [])
    assert result.assignments == {}
    assert result.skipped == 1


def test_addendum_ending_before_parent_end_is_skipped(letter_a, addendum_a):
    early = replace(addendum_a, end_date=date(2024, 1, 12))
    result = extract_assignments([letter_a], [early])
    for _, items in result.by_auditor():
        assert [a.is_addendum for a in items] == [False]
    assert result.skipped == 1


def test_missing_letter_number_label():
    result = extract_assignments([_letter(letter_no=None)], [])
    [(_, items)] = result.by_auditor()
    assert items[0].letter_no == "-"


def test_name_variants_in_one_record_give_one_assignment():
    letter = _letter(team="Budi Santoso, budi  santoso", leader="BUDI SANTOSO")
    result = extract_assignments([letter], [])
    [(name, items)] = result.by_auditor()
    assert name == "Budi Santoso"
    assert len(items) == 1


def test_truncated_name_merges_across_records():
    letters = [
        _letter(1, team="Andre"),
        _letter(2, team="Andre Perkasa Ginting", start_date=date(2024, 3, 1), end_date=date(2024, 3, 5)),
    ]
    result = extract_assignments(letters, [])
    [(name, items)] = result.by_auditor()
    assert name == "Andre Perkasa Ginting"
    assert [a.source_id for a in items] == [1, 2]


def test_input_records_are_not_mutated(letter_a, addendum_a):
    before = (replace(letter_a), replace(addendum_a))
    extract_assignments([letter_a], [addendum_a])
    assert (letter_a, addendum_a) == before


def test_by_auditor_is_alphabetical():
    letter = _letter(team="zainal abidin, Budi Santoso, ani")
    result = extract_assignments([letter], [])
    assert _names(result) == ["ani", "Budi Santoso", "zainal abidin"]


def test_single_day_record_is_kept():
    day = date(2024, 3, 4)
    result = extract_assignments([_letter(start_date=day, end_date=day)], [])
    [(_, items)] = result.by_auditor()
    assert (items[0].start, items[0].end) == (day, day)
    assert result.skipped == 0
