"""One day's bookings across the club's three courts."""

from __future__ import annotations

from .reservation import FREE, Reservation
from .user import User

COURTS = (1, 2, 3)
SLOTS_PER_COURT = 36
_FIRST_SLOT_MINUTES = 6 * 60
_SLOT_MINUTES = 30
CANCELLED = "Free Reservation"


def time_slot_label(slot: int) -> str:
    """Return the ``HH:MM - HH:MM`` label of a half-hour slot, 0 being 06:00."""
    if not 0 <= slot < SLOTS_PER_COURT:
        raise IndexError(f"slot {slot} out of range 0-{SLOTS_PER_COURT - 1}")
    start = _FIRST_SLOT_MINUTES + slot * _SLOT_MINUTES
    end = start + _SLOT_MINUTES

    def fmt(minutes: int) -> str:
        hours, mins = divmod(minutes, 60)
        return f"{hours % 24:02d}:{mins:02d}"

    return f"{fmt(start)} - {fmt(end)}"


class DaySchedule:
    """Reservations for every slot of every court on a single day."""

    def __init__(self) -> None:
        self.members: list[User] = []
        self._courts: dict[int, list[Reservation]] = {
            number: [Reservation([], True, FREE) for _ in range(SLOTS_PER_COURT)]
            for number in COURTS
        }

    def _slots(self, number: int) -> list[Reservation]:
        try:
            return self._courts[number]
        except KeyError:
            raise ValueError(f"no court numbered {number}") from None

    @staticmethod
    def _check_slot(slot: int) -> None:
        if not 0 <= slot < SLOTS_PER_COURT:
            raise IndexError(f"slot {slot} out of range 0-{SLOTS_PER_COURT - 1}")

    def court(self, number: int) -> list[Reservation]:
        """Return a copy of the list of reservations for a court."""
        return list(self._slots(number))

    def set_reservation(self, court: int, slot: int, reservation: Reservation) -> None:
        """Put a reservation into a court's slot, replacing what was there."""
        slots = self._slots(court)
        self._check_slot(slot)
        slots[slot] = reservation

    def add_member(self, user: User) -> None:
        """Register a user with this day's schedule."""
        self.members.append(user)

    def modify_reservation(
        self, court: int, slot: int, user: User, reservation_type: str | None = None
    ) -> None:
        """Add a player to a slot, keeping its free flag and optionally changing its kind."""
        slots = self._slots(court)
        self._check_slot(slot)
        old = slots[slot]
        kind = old.reservation_type if reservation_type is None else reservation_type
        slots[slot] = Reservation([*old.users, user], old.is_free, kind)

    def cancel_reservation(self, court: int, slot: int) -> None:
        """Empty a slot, marking it free again."""
        self.set_reservation(court, slot, Reservation([], True, CANCELLED))

    def court_info(self, number: int) -> str:
        """Serialise a court's reservations, one record per line."""
        return "".join(f"{r.to_record()}\n" for r in self._slots(number))

    def render_grid(self) -> str:
        """Render the day as a text table of time slots against courts."""
        lines = ["Time" + "".join(f"{f'Court #{n}':>40}" for n in COURTS)]
        widths = (35, 40, 40)
        for slot, row in enumerate(zip(*(self._courts[n] for n in COURTS))):
            cells = "".join(f"{str(r):>{w}}" for r, w in zip(row, widths))
            lines.append(time_slot_label(slot) + cells)
        return "\n".join(lines) + "\n"