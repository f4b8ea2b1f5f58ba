"""Pytest configuration and shared fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from agenda.domain import Category, Event, User
from agenda.services import AgendaService
from agenda.stores import InMemoryAgendaStore

START = datetime(2024, 1, 15, 18, 0)


@pytest.fixture
def store() -> InMemoryAgendaStore:
    return InMemoryAgendaStore()


@pytest.fixture
def service(store: InMemoryAgendaStore) -> AgendaService:
    return AgendaService(store)


@pytest.fixture
def alice(service: AgendaService) -> User:
    return service.register_user("Alice", "alice@example.com", "555-0100")


@pytest.fixture
def bob(service: AgendaService) -> User:
    return service.register_user("Bob", "bob@example.com", "555-0101")


@pytest.fixture
def concert(service: AgendaService) -> Event:
    return service.create_event(
        "Rock Night", "Main Square", Category.SHOW, START, "Bands; food; drinks"
    )


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "events.data"
