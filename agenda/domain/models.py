"""Domain models representing persisted state.

These are pure domain objects with no console input rules.
Serialization to the flat file lives in stores/codec.py.
"""

from dataclasses import dataclass, field
from datetime import datetime

from agenda.domain.value_objects import EVENT_DURATION, Category, EventStatus


@dataclass(frozen=True)
class User:
    """Domain representation of a registered User."""

    name: str
    email: str
    phone: str

    def __str__(self) -> str:
        return f"{self.name} ({self.email}, {self.phone})"


@dataclass(eq=False)
class Event:
    """Domain representation of an Event and its participants.

    Events compare by identity; participants keep insertion order and
    hold each user at most once.
    """

    name: str
    address: str
    category: Category
    starts_at: datetime
    description: str
    participants: list[User] = field(default_factory=list)

    @property
    def ends_at(self) -> datetime:
        return self.starts_at + EVENT_DURATION

    def add_participant(self, user: User) -> None:
        if user not in self.participants:
            self.participants.append(user)

    def remove_participant(self, user: User) -> None:
        if user in self.participants:
            self.participants.remove(user)

    def is_participant(self, user: User) -> bool:
        return user in self.participants

    def status(self, now: datetime | None = None) -> EventStatus:
        """Return the event status at ``now`` (defaults to the local clock)."""
        if now is None:
            now = datetime.now()
        if now >= self.ends_at:
            return EventStatus.PAST
        if now >= self.starts_at:
            return EventStatus.ONGOING
        return EventStatus.SCHEDULED
