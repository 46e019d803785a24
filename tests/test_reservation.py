from courtbook.reservation import Reservation
from courtbook.user import Coach, Member

PASSWORD = "password"


def test_empty_free_reservation_record():
    assert Reservation().to_record() == "nouser;noskill;1;Free"


def test_free_reservation_str():
    assert str(Reservation([], True, "Free")) == "Free Reservation"


def test_single_user_constructor():
    alice = Member("alice", PASSWORD, "B")
    res = Reservation(alice, True, "Game ")
    assert res.users == [alice]


def test_record_uses_first_user_skill_and_space_separated_names():
    res = Reservation(
        [Member("alice", PASSWORD, "B"), Member("bob", PASSWORD, "A")], False, "Game "
    )
    record = res.to_record()
    names, skill, free, kind = record.split(";")
    assert names.split(" ") == ["alice", "bob"]
    assert skill == "B"
    assert free == "0"
    assert kind == "Game "


def test_str_lists_names_with_type():
    res = Reservation([Member("alice", PASSWORD, "B"), Coach("bob", PASSWORD)], False, "Game")
    assert str(res) == "Game: alice, bob"


def test_modify_closes_slot_when_two_players():
    res = Reservation([Member("alice", PASSWORD, "A")], True, "Game ")
    res.modify(Member("bob", PASSWORD, "A"), "Open Play with ")
    assert res.is_free is False
    assert res.reservation_type == "Open Play with "
    assert len(res.users) == 2


def test_modify_without_type_keeps_type_and_stays_free_with_one_player():
    res = Reservation([], True, "Game ")
    res.modify(Member("alice", PASSWORD, "A"))
    assert res.is_free is True
    assert res.reservation_type == "Game "


def test_add_user_does_not_change_free_flag():
    res = Reservation([], True, "Game ")
    res.add_user(Member("a", PASSWORD, "A"))
    res.add_user(Member("b", PASSWORD, "A"))
    assert res.is_free is True
    assert [u.username for u in res.users] == ["a", "b"]


def test_constructor_copies_user_list():
    users = [Member("a", PASSWORD, "A")]
    res = Reservation(users, True, "Game ")
    users.append(Member("b", PASSWORD, "A"))
    assert len(res.users) == 1