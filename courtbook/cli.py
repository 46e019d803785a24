"""Interactive court reservation session on text streams."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from .reservation import Reservation
from .schedule import SLOTS_PER_COURT, DaySchedule
from .storage import DAYS, load_schedules, load_users, save_schedules, save_users
from .user import COACH, MEMBER, OFFICER, SKILL_LEVELS, Coach, Member, Officer, User

MONTH = "April"
YEAR = 2023
GAME = "Game "
OPEN_PLAY = "Open Play with "
COACHING = "Reserved for coaching by "
_INT = re.compile(r"[+-]?\d+")
_WORD = re.compile(r"\S+")


class _Input:
    """Whitespace-separated reading from a text stream, like a console."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""

    def _skip(self) -> None:
        while True:
            self._buf = self._buf.lstrip()
            if self._buf:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buf = line

    def char(self) -> str:
        self._skip()
        first, self._buf = self._buf[0], self._buf[1:]
        return first

    def word(self) -> str:
        self._skip()
        match = _WORD.match(self._buf)
        self._buf = self._buf[match.end():]
        return match.group()

    def integer(self) -> int | None:
        self._skip()
        match = _INT.match(self._buf)
        if match is None:
            self.word()
            return None
        self._buf = self._buf[match.end():]
        return int(match.group())


class Session:
    """One run of the reservation program: log in, browse, book and cancel."""

    def __init__(
        self,
        data_dir: str | Path = "data",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self._in = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self.schedules: list[DaySchedule] = []
        self.users: list[User] = []
        self.user: User | None = None
        self.index = 0
        self.messages: list[str] = []

    @property
    def day(self) -> int:
        return self.index + 1

    def _say(self, text: str = "") -> None:
        self._out.write(f"{text}\n")

    def _ask(self, text: str) -> None:
        self._out.write(text)

    def _read_int(self) -> int:
        value = self._in.integer()
        return -1 if value is None else value

    def _ask_int(self, prompt: str, low: int, high: int) -> int:
        value = low - 1
        while not low <= value <= high:
            self._ask(prompt)
            value = self._read_int()
            if not low <= value <= high:
                self._say("Invalid value!")
        return value

    def _ask_skill(self, prompt: str) -> str:
        skill = ""
        while skill not in SKILL_LEVELS:
            self._ask(prompt)
            skill = self._in.char()
            if skill not in SKILL_LEVELS:
                self._say("Invalid input!")
        return skill

    def register(self) -> User:
        """Ask for a role and credentials, and sign the new user in."""
        kind = ""
        while kind not in (MEMBER, COACH, OFFICER):
            self._ask(
                "Please enter your player type, options: 'm' for member, "
                "'c' for coach, 'o' for officer: "
            )
            kind = self._in.char()
            if kind not in (MEMBER, COACH, OFFICER):
                self._say("Invalid input!")
        self._ask("Please enter a username: ")
        username = self._in.word()
        self._ask("Please enter a password: ")
        password = self._in.word()
        user: User
        if kind == MEMBER:
            skill = self._ask_skill(
                "Please enter your player skill, options: 'A' for high skill, "
                "'B' for medium skill, 'C' for low skill\n"
            )
            user = Member(username, password, skill)
        elif kind == COACH:
            user = Coach(username, password)
        else:
            skill = self._ask_skill(
                "Please enter your player skill, options: 'A' for high skill, "
                "'B' for medium skill, 'C' for low skill: "
            )
            user = Officer(username, password, skill)
        self.users.append(user)
        self.user = user
        return user

    def login(self) -> User:
        """Sign in as one of the known users, chosen by name."""
        self._say("Choose from the following users: ")
        for known in self.users:
            self._say(known.username)
        while True:
            self._say("Type in their full name to login: ")
            name = self._in.word()
            found = next((u for u in self.users if u.username == name), None)
            if found is not None:
                self.user = found
                return found
            self._say("Incorrect username, please try again.")

    def _ask_day_slot_court(self, action: str, target: str, place: str) -> tuple[int, int, int]:
        day = self._ask_int(
            f"Enter the day you would like to {action} a reservation in {MONTH} on "
            f"(Enter a number from 1 - {DAYS}): ",
            1,
            DAYS,
        )
        slot = self._ask_int(
            f"Enter the time you would like to {action} {target} for.\n"
            f"(Enter a number from 0 - {SLOTS_PER_COURT - 1}, where 0 is 6 - 6:30 am, "
            "1 is 6:30 - 7 am, and so on): ",
            0,
            SLOTS_PER_COURT - 1,
        )
        court = self._ask_int(
            f"Enter the court number you would like to {action} the reservation {place} "
            "(1, 2, or 3): ",
            1,
            3,
        )
        return day, slot, court

    def _is_officer(self) -> bool:
        return self.user.player_type == OFFICER or self.user.username in (
            "officer1",
            "officer2",
        )

    def book(self) -> None:
        """Ask for a day, time and court, and book the current user into it."""
        day, slot, court = self._ask_day_slot_court("book", "your reservation", "at")
        old = self.schedules[day - 1].court(court)[slot]
        role = self.user.player_type
        pair_kind = single_kind = GAME
        if role == OFFICER:
            while not 18 <= slot <= 24:
                self._say("Officers can only book from 6 pm - 9 pm, please re-enter the time: ")
                slot = self._read_int()
            pair_kind, single_kind = OPEN_PLAY, OPEN_PLAY.rstrip()
        elif role == COACH:
            while True:
                if not 3 <= day <= DAYS:
                    self._ask(
                        "Coaches must reserve court at least 2 days in advanced, "
                        "please re-enter the day: "
                    )
                elif day % 6 == 0:
                    self._say(
                        "Coaches cannot reserve time slots on Saturdays, "
                        "please re-enter the day: "
                    )
                else:
                    break
                day = self._read_int()
            while not (5 <= slot <= 11 or 18 <= slot <= 24):
                self._say(
                    "Coaches can only book from 9 am - 12 pm and 3 pm - 6 pm, "
                    "please re-enter the time: "
                )
                slot = self._read_int()
            pair_kind = single_kind = COACHING
        elif role != MEMBER:
            name = self.user.username
            if name in ("coach1", "coach2"):
                pair_kind = single_kind = COACHING
            elif name in ("officer1", "officer2"):
                pair_kind = single_kind = OPEN_PLAY
        if len(old.users) == 1:
            reservation = Reservation([old.users[0], self.user], False, pair_kind)
        elif not old.users:
            reservation = Reservation([self.user], True, single_kind)
        else:
            if len(old.users) == 2:
                self._say("Reservation is full!")
            return
        self.schedules[day - 1].set_reservation(court, slot, reservation)

    def cancel(self) -> None:
        """Ask for a time and court, and free that slot on the day being shown."""
        _, slot, court = self._ask_day_slot_court("cancel", "your reservation", "at")
        self.schedules[self.index].cancel_reservation(court, slot)

    def _show(self) -> None:
        self._out.write(self.schedules[self.index].render_grid())
        self._say(f"Current Day: {self.day} {MONTH} {YEAR}")
        self._say()
        self._say(f"Showing reservations for date: {self.day} {MONTH} {YEAR}")
        self._say(
            "Click n to view the next day's schedule, b to show previous day's schedule, "
            "q to quit, and a to add a reservation"
        )
        if self._is_officer():
            self._say(
                "Click c to cancel a reservation, click m to see any messages "
                "from coaches and members"
            )
        else:
            self._say("Click t to text a message to an officer")

    def _step(self) -> bool:
        self._show()
        choice = self._in.char()
        if choice == "n":
            self.index = (self.index + 1) % DAYS
        elif choice == "b":
            if self.index > 0:
                self.index -= 1
        elif choice == "m":
            self._say(
                "One message from John: Hello Officer, thank you for cancelling "
                "the reservation earlier!"
            )
            if not self.messages:
                self._say("No other messages received.")
            for message in self.messages:
                self._say(f"Message received: {message}")
        elif choice == "t":
            self._ask("Please input your message here: ")
            self.messages.append(self._in.word())
            self._say("Message has been sent")
        elif choice == "c":
            self.cancel()
        elif choice == "a":
            self.book()
        elif choice == "q":
            return False
        return True

    def _start(self) -> None:
        self._say("Welcome to the Court Reservation System of Newton!")
        while True:
            self._ask("Please click r to register and l to login: ")
            choice = self._in.char()
            if choice == "r":
                self.register()
                return
            if choice == "l":
                self.login()
                return

    def run(self) -> None:
        """Load the data, run the session until quit or end of input, then save."""
        self.schedules = load_schedules(self.data_dir)
        self.users = load_users(self.data_dir)
        try:
            self._start()
            while self._step():
                pass
        except EOFError:
            pass
        save_schedules(self.data_dir, self.schedules)
        save_users(self.data_dir, self.users)


def run(data_dir: str | Path, stdin: TextIO, stdout: TextIO) -> None:
    """Run one interactive session against a data directory."""
    Session(data_dir, stdin, stdout).run()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Book tennis courts for the club.")
    parser.add_argument("--data-dir", default="data", help="directory holding schedule files")
    args = parser.parse_args(argv)
    run(args.data_dir, sys.stdin, sys.stdout)
    return 0