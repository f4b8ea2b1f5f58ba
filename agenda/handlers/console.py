"""Console handler - handles terminal interaction only.

The session:
- Prompts for input and validates it with serializers
- Calls the service for business logic
- Maps domain and validation errors to messages
- Holds the current logged-in user, nothing else
"""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any, TextIO

from django.core.management.base import OutputWrapper
from django.core.management.color import no_style
from rest_framework.exceptions import ValidationError

from agenda.domain import Category, Event, User
from agenda.domain.errors import DomainError
from agenda.handlers.serializers import (
    EventInputSerializer,
    EventSerializer,
    LoginSerializer,
    SelectionSerializer,
    UserRegistrationSerializer,
    first_error,
)
from agenda.services import AgendaService


class ConsoleSession:
    """Interactive menu loop over an AgendaService."""

    def __init__(
        self,
        service: AgendaService,
        stdin: TextIO | None = None,
        stdout: TextIO | OutputWrapper | None = None,
        style: Any = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.service = service
        self.current_user: User | None = None
        self._stdin = stdin or sys.stdin
        if not isinstance(stdout, OutputWrapper):
            stdout = OutputWrapper(stdout or sys.stdout)
        self._stdout = stdout
        self._style = style or no_style()
        self._clock = clock

    def run(self) -> None:
        """Run menus until the user exits or input ends."""
        try:
            while self._step():
                pass
        except EOFError:
            self._say("")

    def _step(self) -> bool:
        self._say("\n===== MAIN MENU =====")
        if self.current_user is None:
            actions = {
                1: self.register_user,
                2: self.login,
            }
            self._say("1 - Register user")
            self._say("2 - Login")
        else:
            actions = {
                1: self.create_event,
                2: self.list_events,
                3: self.join_event,
                4: self.leave_event,
                5: self.my_events,
                6: self.logout,
            }
            self._say(f"User: {self.current_user.name}")
            self._say("1 - Create event")
            self._say("2 - List events")
            self._say("3 - Join event")
            self._say("4 - Cancel participation")
            self._say("5 - My confirmed events")
            self._say("6 - Logout")
        self._say("0 - Exit")

        choice = self._read_choice("Choice: ")
        if choice == 0:
            return False
        action = actions.get(choice)
        if action is None:
            self._error("Invalid option.")
        else:
            action()
        return True

    def register_user(self) -> None:
        self._say("\n--- Register user ---")
        name = self._ask("Name: ")
        email = self._ask("Email: ")
        if self.service.find_user_by_email(email) is not None:
            self._error("Email already registered.")
            return
        phone = self._ask("Phone: ")

        serializer = UserRegistrationSerializer(
            data={"name": name, "email": email, "phone": phone}
        )
        if not self._validate(serializer):
            return
        try:
            self.service.register_user(**serializer.validated_data)
        except DomainError as exc:
            self._error(exc.message)
            return
        self._success("User registered successfully!")

    def login(self) -> None:
        serializer = LoginSerializer(data={"email": self._ask("Enter your email to log in: ")})
        if not self._validate(serializer):
            return
        try:
            self.current_user = self.service.login(serializer.validated_data["email"])
        except DomainError as exc:
            self._error(exc.message)
            return
        self._success(f"Logged in! Welcome, {self.current_user.name}")

    def logout(self) -> None:
        self.current_user = None

    def create_event(self) -> None:
        self._say("\n--- Create event ---")
        name = self._ask("Event name: ")
        address = self._ask("Address: ")
        self._say("Categories:")
        for category in Category:
            self._say(f"{category.index} - {category.name}")
        category = self._ask("Choose the category (number): ")
        starts_at = self._ask("Date and time (format: yyyy-MM-dd HH:mm): ")
        description = self._ask("Description: ")

        serializer = EventInputSerializer(
            data={
                "name": name,
                "address": address,
                "category": category,
                "starts_at": starts_at,
                "description": description,
            }
        )
        if not self._validate(serializer):
            return
        self.service.create_event(**serializer.validated_data)
        self._success("Event created successfully!")

    def list_events(self) -> list[Event]:
        events = self.service.list_events()
        if not events:
            self._say("No events registered.")
            return events
        self._say("\n--- Registered events ---")
        self._print_numbered(events)
        return events

    def join_event(self) -> None:
        events = self.list_events()
        if not events:
            return
        event = self._select("Enter the event number to join: ")
        if event is None:
            return
        if not self.service.join_event(event, self.current_user):
            self._say("You are already participating in this event.")
            return
        self._success(f"Participation confirmed for event: {event.name}")

    def leave_event(self) -> None:
        events = self.service.events_for(self.current_user)
        if not events:
            self._say("You are not participating in any event.")
            return
        self._say("--- Your confirmed events ---")
        self._print_numbered(events)
        event = self._select(
            "Enter the event number to cancel participation: ",
            participant=self.current_user,
        )
        if event is None:
            return
        self.service.leave_event(event, self.current_user)
        self._success(f"Participation cancelled for event: {event.name}")

    def my_events(self) -> None:
        self._say("\n--- Events you are participating in ---")
        events = self.service.events_for(self.current_user)
        if not events:
            self._say("No confirmed events.")
            return
        for event in events:
            self._say(self.format_event(event))

    def format_event(self, event: Event) -> str:
        data = EventSerializer(event, context={"now": self._clock()}).data
        return (
            f"{data['name']} - {data['category']} - {data['address']} - "
            f"{data['starts_at']} {data['status']}"
        )

    def _print_numbered(self, events: list[Event]) -> None:
        for index, event in enumerate(events):
            self._say(f"{index} - {self.format_event(event)}")

    def _select(self, prompt: str, participant: User | None = None) -> Event | None:
        index = self._read_choice(prompt)
        if index is None:
            self._error("Invalid event.")
            return None
        try:
            return self.service.get_event(index, participant=participant)
        except DomainError as exc:
            self._error(f"{exc.message}.")
            return None

    def _read_choice(self, prompt: str) -> int | None:
        serializer = SelectionSerializer(data={"choice": self._ask(prompt)})
        if not serializer.is_valid():
            return None
        return serializer.validated_data["choice"]

    def _validate(self, serializer) -> bool:
        try:
            serializer.is_valid(raise_exception=True)
        except ValidationError as exc:
            self._error(first_error(exc.detail))
            return False
        return True

    def _ask(self, prompt: str) -> str:
        self._stdout.write(prompt, ending="")
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _say(self, message: str) -> None:
        self._stdout.write(message)

    def _success(self, message: str) -> None:
        self._stdout.write(self._style.SUCCESS(message))

    def _error(self, message: str) -> None:
        self._stdout.write(self._style.ERROR(message))
