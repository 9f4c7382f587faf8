"""
Booking enrichment.

Bookings reference their service and user by identifier strings.  For
read convenience the listing endpoints attach copies of the referenced
documents as ``service`` and ``user``.  The join is done by hand:

* references that are not canonical ObjectId strings are never parsed;
* the remaining identifiers are deduplicated and fetched with a single
  ``$in`` query per related collection, the queries running
  concurrently;
* a reference that is malformed, missing or points to a deleted
  document resolves to ``None``.  The booking itself is always kept.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Sequence

from bson import ObjectId

from ..core.db import Storage
from ..core.ids import is_valid_object_id

logger = logging.getLogger(__name__)


def _valid_references(bookings: Sequence[Dict[str, Any]], field: str) -> List[str]:
    return sorted({b.get(field) for b in bookings if is_valid_object_id(b.get(field))})


async def _lookup(collection, identifiers: List[str]) -> Dict[str, Dict[str, Any]]:
    """Fetch all documents whose ``_id`` is in ``identifiers`` in one query."""
    if not identifiers:
        return {}
    cursor = collection.find({"_id": {"$in": [ObjectId(i) for i in identifiers]}})
    documents = await cursor.to_list()
    return {str(doc["_id"]): doc for doc in documents}


def _resolve(mapping: Dict[str, Dict[str, Any]], reference: Any):
    if not is_valid_object_id(reference):
        return None
    return mapping.get(reference)


async def enrich_bookings(
    storage: Storage,
    bookings: Sequence[Dict[str, Any]],
    include_user: bool = False,
) -> List[Dict[str, Any]]:
    """Return ``bookings`` with ``service`` (and optionally ``user``) attached.

    Order of the input is preserved and the input dictionaries are not
    modified.  An empty input returns immediately without touching the
    storage.
    """
    if not bookings:
        return []

    lookups = [_lookup(storage.services, _valid_references(bookings, "serviceId"))]
    if include_user:
        lookups.append(_lookup(storage.users, _valid_references(bookings, "userId")))
    maps = await asyncio.gather(*lookups)
    service_map = maps[0]
    user_map = maps[1] if include_user else {}

    enriched: List[Dict[str, Any]] = []
    for booking in bookings:
        item = dict(booking)
        item["service"] = _resolve(service_map, booking.get("serviceId"))
        if include_user:
            item["user"] = _resolve(user_map, booking.get("userId"))
        enriched.append(item)

    logger.debug(
        "Enriched %d bookings (%d services, %d users resolved)",
        len(enriched),
        len(service_map),
        len(user_map),
    )
    return enriched
