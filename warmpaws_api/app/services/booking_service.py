"""
Business logic for bookings.

Bookings live in the ``bookings`` collection.  New bookings always
start in the ``pending`` status with a server‑side ``createdAt``
timestamp; afterwards only the status is changed, through
:meth:`BookingService.update_status`.  Listings are returned newest
first and enriched with the referenced service (and, for the
administrative listing, the user) via :func:`enrich_bookings`.

Deleting a booking affects nothing else, and deleting a service or user
leaves its bookings in place: their ``service``/``user`` simply
resolve to ``None``.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from ..core.db import Storage
from ..core.ids import parse_object_id
from ..schemas.ack import DeleteAck, InsertAck, UpdateAck
from ..schemas.booking import BookingCreate, BookingStatusUpdate
from .common import clean_payload
from .enrichment import enrich_bookings

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "pending"
DEFAULT_RECENT_LIMIT = 5
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def parse_limit(raw: Optional[str], default: int = DEFAULT_RECENT_LIMIT) -> int:
    """Parse a ``limit`` query value.

    The leading integer is used, so ``"2.5"`` means 2 and ``"10abc"``
    means 10.  Missing, non‑numeric, zero and negative values fall back
    to ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return default
    value = int(match.group(0))
    return value if value > 0 else default


class BookingService:
    """Service for creating, listing and updating bookings."""

    @classmethod
    async def create_booking(cls, storage: Storage, data: BookingCreate) -> InsertAck:
        """Insert a booking with ``status='pending'`` and ``createdAt=now``."""
        document = clean_payload(data.model_dump(exclude_unset=True))
        document["createdAt"] = datetime.now(timezone.utc)
        document["status"] = DEFAULT_STATUS
        result = await storage.bookings.insert_one(document)
        logger.info(
            "User %s booked service %s (booking %s)",
            data.userId,
            data.serviceId,
            result.inserted_id,
        )
        return InsertAck.from_result(result)

    @classmethod
    async def get_booking(cls, storage: Storage, booking_id: str) -> Optional[Dict[str, Any]]:
        return await storage.bookings.find_one({"_id": parse_object_id(booking_id)})

    @classmethod
    async def list_user_bookings(cls, storage: Storage, user_id: str) -> List[Dict[str, Any]]:
        """Bookings of one user, newest first, each with its ``service``."""
        bookings = await storage.bookings.find({"userId": user_id}).sort("createdAt", DESCENDING).to_list()
        return await enrich_bookings(storage, bookings)

    @classmethod
    async def list_all_bookings(cls, storage: Storage) -> List[Dict[str, Any]]:
        """All bookings, newest first, each with its ``service`` and ``user``."""
        bookings = await storage.bookings.find().sort("createdAt", DESCENDING).to_list()
        return await enrich_bookings(storage, bookings, include_user=True)

    @classmethod
    async def recent_bookings(cls, storage: Storage, limit: int = DEFAULT_RECENT_LIMIT) -> List[Dict[str, Any]]:
        """The ``limit`` most recent bookings, each with its ``service``."""
        cursor = storage.bookings.find().sort("createdAt", DESCENDING).limit(limit)
        bookings = await cursor.to_list()
        return await enrich_bookings(storage, bookings)

    @classmethod
    async def update_status(cls, storage: Storage, booking_id: str, data: BookingStatusUpdate) -> UpdateAck:
        """Set the booking's ``status``.  No other field is touched."""
        oid = parse_object_id(booking_id)
        result = await storage.bookings.update_one({"_id": oid}, {"$set": {"status": data.status}})
        logger.info(
            "Booking %s status -> %s (matched=%s)",
            booking_id,
            data.status,
            result.matched_count,
        )
        return UpdateAck.from_result(result)

    @classmethod
    async def delete_booking(cls, storage: Storage, booking_id: str) -> DeleteAck:
        oid = parse_object_id(booking_id)
        result = await storage.bookings.delete_one({"_id": oid})
        logger.info("Deleted booking %s (deleted=%s)", booking_id, result.deleted_count)
        return DeleteAck.from_result(result)
