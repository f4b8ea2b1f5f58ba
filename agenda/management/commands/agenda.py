"""Interactive console for registering users and events.

Loads the data file on start and saves it on exit:

    python manage.py agenda --data-file events.data
"""

import logging
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand

from agenda.domain.errors import StorageError
from agenda.handlers import ConsoleSession
from agenda.services import AgendaService
from agenda.stores import FlatFileAgendaStore

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Run the interactive event registration console."
    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument(
            "--data-file",
            dest="data_file",
            help="Path of the data file (defaults to settings.AGENDA_DATA_FILE).",
        )

    def handle(self, *args, **options):
        path = Path(options["data_file"] or settings.AGENDA_DATA_FILE)
        service = AgendaService(FlatFileAgendaStore(path))

        loaded = True
        try:
            service.load()
        except StorageError as exc:
            loaded = False
            logger.error("Failed to load %s: %s", path, exc.message)
            self.stderr.write(f"Error loading data: {exc.message}")
        else:
            if path.exists():
                self.stdout.write(f"Data loaded from {path}")

        self.stdout.write("Welcome to your city's event system!")
        ConsoleSession(
            service,
            stdin=options.get("stdin"),
            stdout=self.stdout,
            style=self.style,
        ).run()

        if not loaded:
            self.stderr.write(f"Not saving: {path} could not be loaded and is left untouched.")
            return
        try:
            service.save()
        except StorageError as exc:
            logger.error("Failed to save %s: %s", path, exc.message)
            self.stderr.write(f"Error saving data: {exc.message}")
            return
        self.stdout.write(self.style.SUCCESS(f"Data saved to {path}"))
