"""Line-oriented text codec for users and events.

Each record is one line of ``;``-separated fields. Decoding fails soft:
a line with the wrong number of fields decodes to ``None``, while a
well-shaped line carrying an unknown category or a bad timestamp raises
``RecordFormatError``. Callers loading a whole file skip both.
"""

import re
from collections.abc import Iterable
from datetime import datetime

from agenda.domain import Category, Event, User, normalize_email
from agenda.domain.errors import RecordFormatError

USERS_MARKER = "#USUARIOS"
EVENTS_MARKER = "#EVENTOS"
FIELD_SEPARATOR = ";"
EMAIL_SEPARATOR = ","

USER_FIELDS = 3
EVENT_MIN_FIELDS = 5
EVENT_MAX_FIELDS = 6

TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?")


def encode_user(user: User) -> str:
    return FIELD_SEPARATOR.join((user.name, user.email, user.phone))


def decode_user(line: str) -> User | None:
    """Decode a user record; trailing empty fields are ignored."""
    parts = line.split(FIELD_SEPARATOR)
    while parts and not parts[-1]:
        parts.pop()
    if len(parts) != USER_FIELDS:
        return None
    name, email, phone = parts
    return User(name=name, email=email, phone=phone)


def encode_event(event: Event) -> str:
    """Encode an event, collapsing ``;`` in the description to ``,``.

    The participant list is always written, so an event without
    participants ends with an empty sixth field.
    """
    emails = EMAIL_SEPARATOR.join(user.email for user in event.participants)
    return FIELD_SEPARATOR.join(
        (
            event.name,
            event.address,
            event.category.name,
            format_timestamp(event.starts_at),
            event.description.replace(FIELD_SEPARATOR, EMAIL_SEPARATOR),
            emails,
        )
    )


def decode_event(line: str, users: Iterable[User]) -> Event | None:
    """Decode an event record, linking participants among ``users``.

    Participant emails are matched case-insensitively; emails with no
    matching user are dropped.

    Raises:
        RecordFormatError: If the category or timestamp is invalid.
    """
    parts = line.split(FIELD_SEPARATOR, EVENT_MAX_FIELDS - 1)
    if len(parts) < EVENT_MIN_FIELDS:
        return None

    name, address, category_name, timestamp, description = parts[:EVENT_MIN_FIELDS]
    try:
        category = Category.from_name(category_name)
    except ValueError as exc:
        raise RecordFormatError(line, str(exc)) from exc

    event = Event(
        name=name,
        address=address,
        category=category,
        starts_at=parse_timestamp(timestamp, line),
        description=description,
    )

    if len(parts) == EVENT_MAX_FIELDS:
        known = {}
        for user in users:
            known.setdefault(normalize_email(user.email), user)
        for email in filter(None, parts[EVENT_MAX_FIELDS - 1].split(EMAIL_SEPARATOR)):
            user = known.get(normalize_email(email))
            if user is not None:
                event.add_participant(user)
    return event


def format_timestamp(value: datetime) -> str:
    """Render an ISO-8601 local date-time, omitting zero seconds."""
    if value.second == 0 and value.microsecond == 0:
        return value.isoformat(timespec="minutes")
    return value.isoformat()


def parse_timestamp(value: str, line: str = "") -> datetime:
    """Parse an ISO-8601 local date-time such as ``2024-01-15T18:30``.

    Raises:
        RecordFormatError: If the value is not ``yyyy-MM-ddTHH:mm[:ss[.ffffff]]``.
    """
    reason = f"Invalid timestamp: {value!r}"
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise RecordFormatError(line or value, reason)
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise RecordFormatError(line or value, reason) from exc
