"""Flat-file implementation of the AgendaStore.

The file holds a users section and an events section, each introduced by
a marker line. Event records reference users by email, so they are
buffered during the scan and decoded only once every user is loaded.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from agenda.domain import Event, User, normalize_email
from agenda.domain.errors import RecordFormatError, StorageError
from agenda.stores.codec import (
    EVENTS_MARKER,
    USERS_MARKER,
    decode_event,
    decode_user,
    encode_event,
    encode_user,
)
from agenda.stores.interfaces import AgendaSnapshot, AgendaStore

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Decode each line on its own; undecodable lines become blank lines."""
    for number, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode(ENCODING)
        except UnicodeDecodeError:
            logger.warning("Skipping undecodable record at line %d", number)
            yield ""


def read_snapshot(lines: Iterable[str]) -> AgendaSnapshot:
    """Decode marker-delimited records into a linked snapshot.

    Malformed records are logged and skipped. User records repeating an
    email already loaded (compared case-insensitively) are skipped too.
    """
    users: list[User] = []
    seen_emails: set[str] = set()
    event_lines: list[str] = []
    section = None

    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line in (USERS_MARKER, EVENTS_MARKER):
            section = line
            continue
        if not line.strip():
            continue
        if section == USERS_MARKER:
            user = decode_user(line)
            if user is None:
                logger.warning("Skipping malformed user record at line %d", number)
                continue
            key = normalize_email(user.email)
            if key in seen_emails:
                logger.warning("Skipping duplicate user email at line %d", number)
                continue
            seen_emails.add(key)
            users.append(user)
        elif section == EVENTS_MARKER:
            event_lines.append(line)

    events: list[Event] = []
    for line in event_lines:
        try:
            event = decode_event(line, users)
        except RecordFormatError as exc:
            logger.warning("Skipping event record: %s", exc.message)
            continue
        if event is None:
            logger.warning("Skipping malformed event record: %r", line)
            continue
        events.append(event)

    return AgendaSnapshot(users=tuple(users), events=tuple(events))


def render_lines(users: Sequence[User], events: Sequence[Event]) -> list[str]:
    """Encode users and events as marker-delimited lines, in order."""
    lines = [USERS_MARKER]
    lines.extend(encode_user(user) for user in users)
    lines.append(EVENTS_MARKER)
    lines.extend(encode_event(event) for event in events)
    return lines


class FlatFileAgendaStore(AgendaStore):
    """Agenda store backed by a single UTF-8 text file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AgendaSnapshot:
        if not self._path.exists():
            logger.info("No data file at %s, starting empty", self._path)
            return AgendaSnapshot()

        try:
            with self._path.open("rb") as handle:
                snapshot = read_snapshot(decode_lines(handle))
        except OSError as exc:
            raise StorageError(str(self._path), f"Could not read data: {exc}") from exc

        logger.info(
            "Loaded %d users and %d events from %s",
            len(snapshot.users),
            len(snapshot.events),
            self._path,
        )
        return snapshot

    def save(self, users: Sequence[User], events: Sequence[Event]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding=ENCODING, newline="\n") as handle:
                for line in render_lines(users, events):
                    handle.write(line + "\n")
        except OSError as exc:
            raise StorageError(str(self._path), f"Could not save data: {exc}") from exc

        logger.info("Saved %d users and %d events to %s", len(users), len(events), self._path)
