"""In-memory implementation of the AgendaStore.

Keeps the rendered file text instead of live objects, so a reload goes
through the same codec and reconciliation as the flat-file store.
"""

from collections.abc import Sequence

from agenda.domain import Event, User
from agenda.stores.file_store import read_snapshot, render_lines
from agenda.stores.interfaces import AgendaSnapshot, AgendaStore


class InMemoryAgendaStore(AgendaStore):
    """Agenda store holding its records in memory."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def load(self) -> AgendaSnapshot:
        return read_snapshot(self.text.splitlines())

    def save(self, users: Sequence[User], events: Sequence[Event]) -> None:
        self.text = "".join(line + "\n" for line in render_lines(users, events))
