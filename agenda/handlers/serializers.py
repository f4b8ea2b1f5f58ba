"""Serializers for console input and event display.

Input serializers validate raw strings typed at the console. The output
serializer renders Event domain models for listings.
"""

from rest_framework import serializers

from agenda.domain import Category, Event

INPUT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"


class UserRegistrationSerializer(serializers.Serializer):
    """Input for registering a user."""

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    phone = serializers.CharField(max_length=50)


class LoginSerializer(serializers.Serializer):
    """Input for logging in by email."""

    email = serializers.CharField(max_length=254)


class SelectionSerializer(serializers.Serializer):
    """A numeric menu option or list index."""

    choice = serializers.IntegerField(min_value=0)


class EventInputSerializer(serializers.Serializer):
    """Input for creating an event; category is chosen by index."""

    name = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=255)
    category = serializers.IntegerField(min_value=0, max_value=len(Category) - 1)
    starts_at = serializers.DateTimeField(input_formats=[INPUT_DATETIME_FORMAT])
    description = serializers.CharField(allow_blank=True, default="")

    def validate_category(self, value: int) -> Category:
        return Category.from_index(value)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model.

    Pass ``now`` in the context to pin the status computation.
    """

    name = serializers.CharField()
    category = serializers.CharField(source="category.name")
    address = serializers.CharField()
    starts_at = serializers.DateTimeField(format=DISPLAY_DATETIME_FORMAT)
    status = serializers.SerializerMethodField()

    def get_status(self, event: Event) -> str:
        return event.status(self.context.get("now")).tag


def first_error(detail) -> str:
    """Flatten a ValidationError detail into its first message."""
    if isinstance(detail, dict):
        field, errors = next(iter(detail.items()))
        message = first_error(errors)
        return message if field == "non_field_errors" else f"{field}: {message}"
    if isinstance(detail, list):
        return first_error(detail[0]) if detail else ""
    return str(detail)
