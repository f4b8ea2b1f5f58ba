"""Unit tests for domain primitives and entities.

Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta

import pytest

from agenda.domain import EVENT_DURATION, Category, Event, EventStatus, User, normalize_email
from agenda.domain.errors import DuplicateEmailError, ErrorCode

START = datetime(2024, 1, 15, 18, 0)


def make_event(**overrides) -> Event:
    fields = {
        "name": "Derby",
        "address": "Stadium",
        "category": Category.ESPORTE,
        "starts_at": START,
        "description": "Final match",
    }
    fields.update(overrides)
    return Event(**fields)


class TestCategory:
    """Tests for Category value object."""

    def test_members_keep_selection_order(self):
        """Declaration order is the index shown to users."""
        assert [c.name for c in Category] == [
            "FESTA",
            "SHOW",
            "ESPORTE",
            "CONFERENCIA",
            "TEATRO",
            "OUTROS",
        ]

    def test_from_index(self):
        """from_index maps positions to members."""
        assert Category.from_index(0) is Category.FESTA
        assert Category.from_index(5) is Category.OUTROS
        assert Category.TEATRO.index == 4

    @pytest.mark.parametrize("index", [-1, 6])
    def test_from_index_out_of_range(self, index):
        """from_index raises ValueError outside 0..5."""
        with pytest.raises(ValueError):
            Category.from_index(index)

    def test_from_name_is_case_sensitive(self):
        """from_name accepts exact names only."""
        assert Category.from_name("CONFERENCIA") is Category.CONFERENCIA
        with pytest.raises(ValueError):
            Category.from_name("conferencia")

    def test_label(self):
        """Each category has an English label."""
        assert Category.FESTA.label == "Party"


class TestUser:
    """Tests for User entity."""

    def test_equality_is_structural(self):
        """Users with the same three fields are equal."""
        assert User("Ana", "ana@x.com", "1") == User("Ana", "ana@x.com", "1")
        assert User("Ana", "ana@x.com", "1") != User("Ana", "ana@x.com", "2")

    def test_is_immutable(self):
        """Users cannot be edited after creation."""
        user = User("Ana", "ana@x.com", "1")
        with pytest.raises(AttributeError):
            user.name = "Other"

    def test_normalize_email_ignores_case(self):
        """Email keys compare case-insensitively."""
        assert normalize_email(" Ana@X.com ") == normalize_email("ana@x.COM")


class TestParticipants:
    """Tests for event membership operations."""

    def test_add_participant_twice_keeps_one_entry(self):
        """add_participant is idempotent."""
        event = make_event()
        user = User("Ana", "ana@x.com", "1")
        event.add_participant(user)
        event.add_participant(user)
        assert event.participants == [user]

    def test_participants_keep_insertion_order(self):
        """Participants are listed in the order they joined."""
        event = make_event()
        first, second = User("A", "a@x.com", "1"), User("B", "b@x.com", "2")
        event.add_participant(second)
        event.add_participant(first)
        assert event.participants == [second, first]

    def test_remove_participant(self):
        """remove_participant drops the user."""
        event = make_event()
        user = User("Ana", "ana@x.com", "1")
        event.add_participant(user)
        event.remove_participant(user)
        assert not event.is_participant(user)

    def test_remove_absent_participant_is_noop(self):
        """Removing a non-participant is not an error."""
        event = make_event()
        event.remove_participant(User("Ana", "ana@x.com", "1"))
        assert event.participants == []

    def test_is_participant_uses_all_fields(self):
        """Membership compares the whole user record."""
        event = make_event()
        event.add_participant(User("Ana", "ana@x.com", "1"))
        assert event.is_participant(User("Ana", "ana@x.com", "1"))
        assert not event.is_participant(User("Ana", "ana@x.com", "9"))


class TestEventStatus:
    """Tests for the time-derived event status."""

    @pytest.mark.parametrize(
        ("now", "expected"),
        [
            (datetime(2024, 1, 15, 18, 0), EventStatus.ONGOING),
            (datetime(2024, 1, 15, 21, 59), EventStatus.ONGOING),
            (datetime(2024, 1, 15, 22, 0), EventStatus.PAST),
            (datetime(2024, 1, 15, 10, 0), EventStatus.SCHEDULED),
            (datetime(2024, 1, 16, 9, 0), EventStatus.PAST),
        ],
    )
    def test_status_at(self, now, expected):
        """Ongoing for four hours from the start, past afterwards."""
        assert make_event().status(now) is expected

    def test_ends_at(self):
        """Events last a fixed four hours."""
        assert make_event().ends_at == START + EVENT_DURATION
        assert EVENT_DURATION == timedelta(hours=4)

    def test_status_defaults_to_current_time(self):
        """Without now, status uses the local clock."""
        assert make_event(starts_at=datetime.now() + timedelta(days=1)).status() is (
            EventStatus.SCHEDULED
        )

    def test_events_compare_by_identity(self):
        """Two events with identical fields are still distinct."""
        assert make_event() != make_event()


class TestDomainError:
    """Tests for domain error rendering."""

    def test_str_includes_code(self):
        """Errors render as CODE: message."""
        error = DuplicateEmailError("ana@x.com")
        assert error.code is ErrorCode.DUPLICATE_EMAIL
        assert str(error) == "DUPLICATE_EMAIL: Email already registered"
        assert error.email == "ana@x.com"
