"""Agenda service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Own the canonical user and event collections
- Enforce registration invariants
- Return domain models or raise domain errors
"""

import logging
from datetime import datetime

from agenda.domain import Category, Event, User, normalize_email
from agenda.domain.errors import DuplicateEmailError, EventNotFoundError, UserNotFoundError
from agenda.stores.interfaces import AgendaStore

logger = logging.getLogger(__name__)


class AgendaService:
    """Service for user registration, events and participation."""

    def __init__(self, store: AgendaStore) -> None:
        self._store = store
        self._users: list[User] = []
        self._events: list[Event] = []

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    @property
    def events(self) -> tuple[Event, ...]:
        """Events in creation (and persistence) order."""
        return tuple(self._events)

    def load(self) -> None:
        """Replace the in-memory collections with the store contents.

        Raises:
            StorageError: If the store exists but cannot be read.
        """
        snapshot = self._store.load()
        self._users = list(snapshot.users)
        self._events = list(snapshot.events)

    def save(self) -> None:
        """Persist the current collections.

        Raises:
            StorageError: If the store cannot be written.
        """
        self._store.save(self._users, self._events)

    def find_user_by_email(self, email: str) -> User | None:
        """Return the user with this email, ignoring case, or None."""
        key = normalize_email(email)
        for user in self._users:
            if normalize_email(user.email) == key:
                return user
        return None

    def register_user(self, name: str, email: str, phone: str) -> User:
        """Create and store a new user.

        Raises:
            DuplicateEmailError: If the email is taken in any letter case.
        """
        if self.find_user_by_email(email) is not None:
            raise DuplicateEmailError(email)
        user = User(name=name, email=email, phone=phone)
        self._users.append(user)
        logger.info("Registered user %s", email)
        return user

    def login(self, email: str) -> User:
        """Return the user to act as the session's current user.

        Raises:
            UserNotFoundError: If no user has this email.
        """
        user = self.find_user_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    def create_event(
        self,
        name: str,
        address: str,
        category: Category,
        starts_at: datetime,
        description: str,
    ) -> Event:
        event = Event(
            name=name,
            address=address,
            category=category,
            starts_at=starts_at,
            description=description,
        )
        self._events.append(event)
        logger.info("Created event %r at %s", name, starts_at.isoformat())
        return event

    def list_events(self) -> list[Event]:
        """Return events sorted by start time, leaving stored order as is."""
        return sorted(self._events, key=lambda event: event.starts_at)

    def events_for(self, user: User) -> list[Event]:
        """Return the events ``user`` takes part in, sorted by start time."""
        return [event for event in self.list_events() if event.is_participant(user)]

    def get_event(self, index: int, participant: User | None = None) -> Event:
        """Return the event at ``index`` of the start-time ordered listing.

        With ``participant``, index into that user's events instead.

        Raises:
            EventNotFoundError: If the index is out of range.
        """
        events = self.list_events() if participant is None else self.events_for(participant)
        if not 0 <= index < len(events):
            raise EventNotFoundError(index)
        return events[index]

    def is_participant(self, event: Event, user: User) -> bool:
        return event.is_participant(user)

    def join_event(self, event: Event, user: User) -> bool:
        """Add ``user`` to ``event``; return False if already participating."""
        if event.is_participant(user):
            return False
        event.add_participant(user)
        return True

    def leave_event(self, event: Event, user: User) -> bool:
        """Remove ``user`` from ``event``; return False if not participating."""
        if not event.is_participant(user):
            return False
        event.remove_participant(user)
        return True
