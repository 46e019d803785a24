import pytest

from courtbook.reservation import Reservation
from courtbook.schedule import SLOTS_PER_COURT, DaySchedule
from courtbook.storage import (
    DAYS,
    court_file,
    load_schedules,
    load_users,
    parse_court_records,
    save_schedules,
    save_users,
)
from courtbook.user import Member, User


def _free_text(count=SLOTS_PER_COURT):
    return "nouser;noskill;1;Free\n" * count


def test_parse_free_records():
    records = parse_court_records(_free_text())
    assert len(records) == SLOTS_PER_COURT
    assert all(r.users == [] and r.is_free and r.reservation_type == "Free" for r in records)


def test_parse_record_with_players():
    text = "alice bob;B;0;Game \n" + _free_text(SLOTS_PER_COURT - 1)
    first = parse_court_records(text)[0]
    assert [u.username for u in first.users] == ["alice", "bob"]
    assert [u.skill for u in first.users] == ["B", "B"]
    assert first.is_free is False
    assert first.reservation_type == "Game "


def test_parse_too_few_records():
    with pytest.raises(ValueError):
        parse_court_records(_free_text(10))


def test_parse_bad_free_flag():
    with pytest.raises(ValueError):
        parse_court_records("nouser;noskill;x;Free\n" + _free_text(SLOTS_PER_COURT))


def test_parse_malformed_record():
    with pytest.raises(ValueError):
        parse_court_records("nouser;noskill\n" + _free_text(SLOTS_PER_COURT))


def test_load_schedules_from_empty_dir(tmp_path):
    schedules = load_schedules(tmp_path)
    assert len(schedules) == DAYS
    assert schedules[0].court_info(1) == DaySchedule().court_info(1)


def test_schedules_round_trip(tmp_path):
    schedules = [DaySchedule() for _ in range(DAYS)]
    schedules[4].set_reservation(
        2, 7, Reservation([Member("alice", "password", "A")], True, "Game ")
    )
    save_schedules(tmp_path, schedules)
    loaded = load_schedules(tmp_path)
    assert [s.court_info(c) for s in loaded for c in (1, 2, 3)] == [
        s.court_info(c) for s in schedules for c in (1, 2, 3)
    ]
    assert court_file(tmp_path, 2, 4).read_text().splitlines()[7] == "alice;A;1;Game "


def test_save_users_writes_names(tmp_path):
    save_users(tmp_path, [User("ann"), User("ben")])
    assert (tmp_path / "users.txt").read_text() == "ann\nben\n"


def test_users_round_trip(tmp_path):
    save_users(tmp_path, [User("ann"), Member("ben", "password", "C")])
    users = load_users(tmp_path)
    assert [u.username for u in users] == ["ann", "ben"]
    assert all(u.player_type == "b" for u in users)


def test_load_users_skips_blank_lines(tmp_path):
    (tmp_path / "users.txt").write_text("ann\n\nben\n")
    assert [u.username for u in load_users(tmp_path)] == ["ann", "ben"]


def test_load_users_missing_file(tmp_path):
    assert load_users(tmp_path) == []