"""Club users: members, coaches and officers."""

from __future__ import annotations

from dataclasses import dataclass

MEMBER = "m"
COACH = "c"
OFFICER = "o"

SKILL_LEVELS = ("A", "B", "C")


@dataclass
class User:
    """A person known to the reservation system.

    ``skill`` is a one-letter skill grade and ``player_type`` a one-letter
    role code ("m", "c" or "o"); an empty ``player_type`` means the role is
    unknown.
    """

    username: str
    password: str = ""
    skill: str = "A"
    player_type: str = ""


class Member(User):
    """A club member with a skill grade."""

    def __init__(self, username: str, password: str, skill: str) -> None:
        super().__init__(username, password, skill, MEMBER)


class Coach(User):
    """A coach; coaches carry the fixed skill grade "P"."""

    def __init__(self, username: str, password: str) -> None:
        super().__init__(username, password, "P", COACH)


class Officer(User):
    """A club officer with a skill grade."""

    def __init__(self, username: str, password: str, skill: str) -> None:
        super().__init__(username, password, skill, OFFICER)