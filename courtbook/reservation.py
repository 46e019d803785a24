"""A single time-slot reservation on one court."""

from __future__ import annotations

from collections.abc import Iterable

from .user import User

FREE = "Free"
MAX_PLAYERS = 2


class Reservation:
    """The players booked into one slot, whether it still has room, and its kind."""

    def __init__(
        self,
        users: User | Iterable[User] = (),
        is_free: bool = True,
        reservation_type: str = FREE,
    ) -> None:
        if isinstance(users, User):
            users = [users]
        self.users: list[User] = list(users)
        self.is_free = is_free
        self.reservation_type = reservation_type

    def add_user(self, user: User) -> None:
        """Add a player to the reservation."""
        self.users.append(user)

    def modify(self, user: User, reservation_type: str | None = None) -> None:
        """Add a player, optionally change the kind, and close the slot when full."""
        self.add_user(user)
        if reservation_type is not None:
            self.reservation_type = reservation_type
        if len(self.users) == MAX_PLAYERS:
            self.is_free = False

    def to_record(self) -> str:
        """Serialise as ``names;skill;free;type`` for storage."""
        names = " ".join(u.username for u in self.users) if self.users else "nouser"
        skill = self.users[0].skill if self.users else "noskill"
        free = "1" if self.is_free else "0"
        return f"{names};{skill};{free};{self.reservation_type}"

    def __str__(self) -> str:
        if self.reservation_type == FREE:
            return "Free Reservation"
        names = ", ".join(u.username for u in self.users)
        return f"{self.reservation_type}: {names}"

    def __repr__(self) -> str:
        return (
            f"Reservation(users={self.users!r}, is_free={self.is_free!r}, "
            f"reservation_type={self.reservation_type!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return (self.users, self.is_free, self.reservation_type) == (
            other.users,
            other.is_free,
            other.reservation_type,
        )