"""Reading and writing day schedules and the user list in a data directory."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from .reservation import Reservation
from .schedule import COURTS, SLOTS_PER_COURT, DaySchedule
from .user import User

DAYS = 14
NO_USER = "nouser"
USERS_FILE = "users.txt"
LOADED_USER_CODE = "b"


def court_file(data_dir: str | Path, court: int, day: int) -> Path:
    """Return the path of the file holding one court's bookings for one day."""
    return Path(data_dir) / f"Court{court}Day{day}.txt"


def _parse_record(line: str) -> Reservation:
    fields = line.split(";", 3)
    if len(fields) < 4:
        raise ValueError(f"malformed reservation record: {line!r}")
    names, skill, free, kind = fields
    try:
        is_free = int(free) != 0
    except ValueError:
        raise ValueError(f"bad free flag in record: {line!r}") from None
    users: list[User] = []
    if names != NO_USER:
        users = [User(name, "", skill[:1]) for name in names.split(" ") if name]
    return Reservation(users, is_free, kind)


def parse_court_records(text: str) -> list[Reservation]:
    """Parse one court's day file into its slot reservations.

    Raises ValueError when a record is malformed or there are too few records.
    """
    reservations = [_parse_record(line) for line in text.splitlines() if line]
    if len(reservations) < SLOTS_PER_COURT:
        raise ValueError(
            f"expected {SLOTS_PER_COURT} reservation records, found {len(reservations)}"
        )
    return reservations[:SLOTS_PER_COURT]


def load_schedules(data_dir: str | Path) -> list[DaySchedule]:
    """Load the fourteen day schedules; missing files leave days free."""
    schedules = [DaySchedule() for _ in range(DAYS)]
    for court in COURTS:
        for day, schedule in enumerate(schedules):
            path = court_file(data_dir, court, day)
            if not path.is_file():
                continue
            records = parse_court_records(path.read_text(encoding="utf-8"))
            for slot, reservation in enumerate(records):
                schedule.set_reservation(court, slot, reservation)
    return schedules


def save_schedules(data_dir: str | Path, schedules: Sequence[DaySchedule]) -> None:
    """Write every court of every day schedule to its own file."""
    Path(data_dir).mkdir(parents=True, exist_ok=True)
    for court in COURTS:
        for day, schedule in enumerate(schedules):
            court_file(data_dir, court, day).write_text(
                schedule.court_info(court), encoding="utf-8"
            )


def load_users(data_dir: str | Path) -> list[User]:
    """Load the known users, one username per line; missing file means none."""
    path = Path(data_dir) / USERS_FILE
    if not path.is_file():
        return []
    return [
        User(line, "", LOADED_USER_CODE, LOADED_USER_CODE)
        for line in path.read_text(encoding="utf-8").splitlines()
        if line
    ]


def save_users(data_dir: str | Path, users: Iterable[User]) -> None:
    """Write the usernames of the given users, one per line."""
    Path(data_dir).mkdir(parents=True, exist_ok=True)
    (Path(data_dir) / USERS_FILE).write_text(
        "".join(f"{user.username}\n" for user in users), encoding="utf-8"
    )