from courtbook.user import COACH, MEMBER, OFFICER, Coach, Member, Officer, User

PASSWORD = "password"


def test_plain_user_defaults_to_skill_a_and_unknown_type():
    user = User("alice", PASSWORD)
    assert user.skill == "A"
    assert user.player_type == ""


def test_user_with_skill_and_type():
    user = User("bob", PASSWORD, "b", "b")
    assert (user.username, user.skill, user.player_type) == ("bob", "b", "b")


def test_member_role_and_skill():
    member = Member("carol", PASSWORD, "B")
    assert member.player_type == MEMBER
    assert member.skill == "B"
    assert member.password == PASSWORD


def test_coach_has_fixed_skill():
    coach = Coach("dave", PASSWORD)
    assert coach.player_type == COACH
    assert coach.skill == "P"


def test_officer_role():
    officer = Officer("erin", PASSWORD, "C")
    assert officer.player_type == OFFICER
    assert officer.skill == "C"


def test_subclasses_are_users():
    member = Member("x", PASSWORD, "A")
    coach = Coach("y", PASSWORD)
    officer = Officer("z", PASSWORD, "B")
    assert isinstance(member, User)
    assert (member.username, member.skill, member.player_type) == ("x", "A", MEMBER)
    assert (coach.username, coach.skill, coach.player_type) == ("y", "P", COACH)
    assert (officer.username, officer.skill, officer.player_type) == ("z", "B", OFFICER)


def test_fields_can_be_changed():
    user = User("frank", PASSWORD)
    user.username = "grace"
    user.skill = "C"
    assert (user.username, user.skill) == ("grace", "C")