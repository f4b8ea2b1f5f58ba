"""Domain primitives that enforce validity at creation time."""

from datetime import timedelta
from enum import Enum
from typing import Self

EVENT_DURATION = timedelta(hours=4)


class Category(Enum):
    """Fixed event categories.

    Member names are the persisted names; declaration order is the
    selection index shown to users.
    """

    FESTA = "Party"
    SHOW = "Show"
    ESPORTE = "Sports"
    CONFERENCIA = "Conference"
    TEATRO = "Theater"
    OUTROS = "Other"

    @property
    def label(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        return list(type(self)).index(self)

    @classmethod
    def from_index(cls, index: int) -> Self:
        members = list(cls)
        if not 0 <= index < len(members):
            raise ValueError(f"Category index out of range: {index}")
        return members[index]

    @classmethod
    def from_name(cls, name: str) -> Self:
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown category: {name!r}") from None


class EventStatus(Enum):
    """Time-derived status of an event."""

    SCHEDULED = "SCHEDULED"
    ONGOING = "ONGOING"
    PAST = "PAST"

    @property
    def tag(self) -> str:
        return {
            EventStatus.SCHEDULED: "[SCHEDULED]",
            EventStatus.ONGOING: "[HAPPENING NOW]",
            EventStatus.PAST: "[ALREADY HAPPENED]",
        }[self]


def normalize_email(email: str) -> str:
    """Return the case-insensitive comparison key for an email."""
    return email.strip().casefold()
