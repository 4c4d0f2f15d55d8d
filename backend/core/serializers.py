"""
Core app serializers.

Shared building blocks for every resource serializer in the project:

- ``TimeStampedSerializer`` — base ``ModelSerializer`` that renders the
  common ``id`` / ``createdAt`` / ``updatedAt`` triple.
- ``ReferenceField``         — advisory cross-resource identifier
  (accepted as int or numeric string, rendered as a string).
- ``CaseInsensitiveChoiceField`` — enum field that folds case before
  validating and stores the canonical value.
- ``MessageSerializer``      — ``{"message": ...}`` bodies (docs only).

The external JSON shape is camelCase; model attributes stay snake_case and
are mapped with ``source=`` on each declared field.
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from core.constants import MAX_STORED_INTEGER


class ReferenceField(serializers.Field):
    """
    Identifier pointing at another resource without enforced existence.

    Accepts ``42`` or ``"42"`` on input and always renders ``"42"``.
    Values must lie between 1 and ``MAX_STORED_INTEGER``.
    """

    default_error_messages = {
        "invalid": "Must be a valid identifier.",
    }

    def to_internal_value(self, data: Any) -> int:
        if isinstance(data, bool):
            self.fail("invalid")
        if isinstance(data, int):
            value = data
        elif isinstance(data, str) and data.strip().isdecimal():
            try:
                value = int(data.strip())
            except ValueError:
                self.fail("invalid")
        else:
            self.fail("invalid")
        if not 1 <= value <= MAX_STORED_INTEGER:
            self.fail("invalid")
        return value

    def to_representation(self, value: Any) -> str | None:
        return None if value is None else str(value)


class CaseInsensitiveChoiceField(serializers.ChoiceField):
    """
    ``ChoiceField`` that matches its input case-insensitively and returns
    the declared (canonical) choice value.
    """

    def to_internal_value(self, data: Any) -> Any:
        if isinstance(data, str):
            folded = data.strip().lower()
            for key in self.choices:
                if str(key).lower() == folded:
                    return key
        return super().to_internal_value(data)


class TimeStampedSerializer(serializers.ModelSerializer):
    """
    Base serializer for any ``TimeStampedModel``.

    Subclasses list ``"id"``, ``"createdAt"`` and ``"updatedAt"`` in their
    ``Meta.fields`` alongside their own fields.
    """

    id = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    COMMON_FIELDS = ["id", "createdAt", "updatedAt"]


class MessageSerializer(serializers.Serializer):
    """Plain ``{"message": "..."}`` acknowledgement body."""

    message = serializers.CharField(read_only=True)
