"""Django settings for the agenda console.

There is no database; state lives in the flat file named by
AGENDA_DATA_FILE.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "agenda-local-console")
DEBUG = os.environ.get("DJANGO_DEBUG", "") == "1"
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "rest_framework",
    "agenda",
]

DATABASES: dict = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = False

AGENDA_DATA_FILE = Path(os.environ.get("AGENDA_DATA_FILE", "events.data"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "agenda": {
            "handlers": ["console"],
            "level": os.environ.get("AGENDA_LOG_LEVEL", "WARNING"),
            "propagate": True,
        },
    },
}
