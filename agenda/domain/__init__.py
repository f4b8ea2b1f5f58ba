from agenda.domain.models import Event, User
from agenda.domain.value_objects import EVENT_DURATION, Category, EventStatus, normalize_email

__all__ = [
    "Event",
    "User",
    "Category",
    "EventStatus",
    "EVENT_DURATION",
    "normalize_email",
]
