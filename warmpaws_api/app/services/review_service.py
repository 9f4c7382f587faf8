"""
Business logic for reviews.

Reviews are stored in the ``reviews`` collection with a server‑side
``createdAt`` timestamp.  Like bookings they reference services and
users by identifier strings that are not checked for existence.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from ..core.db import Storage
from ..core.ids import parse_object_id
from ..schemas.ack import DeleteAck, InsertAck
from ..schemas.review import ReviewCreate
from .common import clean_payload

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for handling reviews of pet‑care services."""

    @classmethod
    async def create_review(cls, storage: Storage, data: ReviewCreate) -> InsertAck:
        document = clean_payload(data.model_dump(exclude_unset=True))
        document["createdAt"] = datetime.now(timezone.utc)
        result = await storage.reviews.insert_one(document)
        logger.info(
            "User %s reviewed service %s (review %s)",
            data.userId,
            data.serviceId,
            result.inserted_id,
        )
        return InsertAck.from_result(result)

    @classmethod
    async def get_review(cls, storage: Storage, review_id: str) -> Optional[Dict[str, Any]]:
        return await storage.reviews.find_one({"_id": parse_object_id(review_id)})

    @classmethod
    async def list_service_reviews(cls, storage: Storage, service_id: str) -> List[Dict[str, Any]]:
        return await storage.reviews.find({"serviceId": service_id}).to_list()

    @classmethod
    async def list_user_reviews(cls, storage: Storage, user_id: str) -> List[Dict[str, Any]]:
        return await storage.reviews.find({"userId": user_id}).to_list()

    @classmethod
    async def list_all_reviews(cls, storage: Storage) -> List[Dict[str, Any]]:
        """All reviews, newest first."""
        return await storage.reviews.find().sort("createdAt", DESCENDING).to_list()

    @classmethod
    async def delete_review(cls, storage: Storage, review_id: str) -> DeleteAck:
        oid = parse_object_id(review_id)
        result = await storage.reviews.delete_one({"_id": oid})
        logger.info("Deleted review %s (deleted=%s)", review_id, result.deleted_count)
        return DeleteAck.from_result(result)
