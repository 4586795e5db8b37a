from __future__ import annotations

import pytest

from signage.data_source.models import DisplaySnapshot, RosterEntry, parse_team_members_response


def test_parse_team_members_should_keep_backend_order() -> None:
    rows = [
        {"id": 1, "name": "Ann", "birthday_month": 3, "birthday_day": 5, "photo_url": "https://cdn/ann.jpg"},
        {"id": 2, "name": "Bo", "birthday_month": "3", "birthday_day": "5", "photo_url": ""},
    ]
    snapshot = parse_team_members_response("org-1", rows)
    assert snapshot.organization_id == "org-1"
    assert [entry.name for entry in snapshot] == ["Ann", "Bo"]
    assert snapshot.entries[0].id == "1"
    assert snapshot.entries[0].photo_url == "https://cdn/ann.jpg"
    assert snapshot.entries[1].photo_url is None
    assert snapshot.entries[1].birth_month == 3


def test_parse_team_members_should_skip_malformed_rows() -> None:
    rows = [
        {"id": 1, "name": "Ann", "birthday_month": 13, "birthday_day": 5},
        {"id": 2, "name": "   ", "birthday_month": 3, "birthday_day": 5},
        {"id": 3, "birthday_month": 3, "birthday_day": 5},
        {"id": 4, "name": "Cy", "birthday_month": 4, "birthday_day": "x"},
        {"id": 6, "name": None, "birthday_month": 3, "birthday_day": 5},
        {"id": 7, "name": 42, "birthday_month": 3, "birthday_day": 5},
        None,
        "Eve",
        {"id": 5, "name": "Dee", "birthday_month": 4, "birthday_day": 1},
    ]
    snapshot = parse_team_members_response("org-1", rows)
    assert [entry.name for entry in snapshot] == ["Dee"]


def test_parse_team_members_should_accept_empty_payload() -> None:
    assert len(parse_team_members_response("org-1", None)) == 0
    assert len(parse_team_members_response("org-1", [])) == 0


def test_roster_entry_should_validate_date_and_label() -> None:
    entry = RosterEntry(id="m1", name="Ann", birth_month=3, birth_day=5)
    assert entry.birthday_label == "March 5"
    assert entry.is_born_on(3, 5)
    assert not entry.is_born_on(3, 6)
    with pytest.raises(ValueError):
        RosterEntry(id="m2", name="Bo", birth_month=0, birth_day=5)
    with pytest.raises(ValueError):
        RosterEntry(id="m3", name="Cy", birth_month=2, birth_day=32)


def test_empty_snapshot_should_have_no_entries() -> None:
    snapshot = DisplaySnapshot.empty("org-9")
    assert snapshot.organization_id == "org-9"
    assert list(snapshot) == []
