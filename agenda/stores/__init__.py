from agenda.stores.file_store import FlatFileAgendaStore
from agenda.stores.interfaces import AgendaSnapshot, AgendaStore
from agenda.stores.memory_store import InMemoryAgendaStore

__all__ = [
    "AgendaSnapshot",
    "AgendaStore",
    "FlatFileAgendaStore",
    "InMemoryAgendaStore",
]
