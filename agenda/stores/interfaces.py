"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from agenda.domain import Event, User


@dataclass(frozen=True)
class AgendaSnapshot:
    """Users and events as read from a store, participants already linked."""

    users: tuple[User, ...] = ()
    events: tuple[Event, ...] = ()


class AgendaStore(ABC):
    """Interface for agenda persistence operations."""

    @abstractmethod
    def load(self) -> AgendaSnapshot:
        """Return every persisted user and event.

        A store with nothing persisted yet returns an empty snapshot.

        Raises:
            StorageError: If the backing storage exists but cannot be read.
        """
        ...

    @abstractmethod
    def save(self, users: Sequence[User], events: Sequence[Event]) -> None:
        """Replace the persisted state with ``users`` and ``events``.

        Raises:
            StorageError: If the backing storage cannot be written.
        """
        ...
