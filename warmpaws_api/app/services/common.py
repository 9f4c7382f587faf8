"""Helpers shared by the collection services."""

from typing import Any, Dict


def clean_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``payload`` without the ``_id`` key.

    Identifiers are always assigned by the database and never taken
    from request bodies.
    """
    return {key: value for key, value in payload.items() if key != "_id"}


def require_changes(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``payload`` cleaned for ``$set``; reject an empty update."""
    changes = clean_payload(payload)
    if not changes:
        raise ValueError("No fields to update")
    return changes
