"""
Validation of MongoDB document identifiers.

Bookings and reviews reference services and users by plain strings.
Those strings are not guaranteed to be valid ``ObjectId`` values, so
every conversion goes through :func:`is_valid_object_id` first.
"""

from typing import Any

from bson import ObjectId


class InvalidIdentifierError(ValueError):
    """Raised when a value cannot be used as a document identifier."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid identifier: {value}")
        self.value = value


def is_valid_object_id(value: Any) -> bool:
    """Return ``True`` if ``value`` is the canonical string form of an ObjectId.

    The value must be a 24 character hex string that round‑trips
    unchanged through ``ObjectId``, so upper‑case or otherwise
    non‑canonical spellings are rejected.  Never raises.
    """
    if not isinstance(value, str):
        return False
    if not ObjectId.is_valid(value):
        return False
    return str(ObjectId(value)) == value


def parse_object_id(value: Any) -> ObjectId:
    """Convert ``value`` to an ``ObjectId`` or raise ``InvalidIdentifierError``."""
    if not is_valid_object_id(value):
        raise InvalidIdentifierError(value)
    return ObjectId(value)
