"""
Business logic for users.

User profiles are opaque documents in the ``users`` collection.  The
API stores and returns them without interpretation; authentication is
handled outside this service.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.db import Storage
from ..core.ids import parse_object_id
from ..schemas.ack import DeleteAck, InsertAck, UpdateAck
from .common import clean_payload, require_changes

logger = logging.getLogger(__name__)


class UserService:
    """CRUD operations on the ``users`` collection."""

    @classmethod
    async def list_users(cls, storage: Storage) -> List[Dict[str, Any]]:
        return await storage.users.find().to_list()

    @classmethod
    async def get_user(cls, storage: Storage, user_id: str) -> Optional[Dict[str, Any]]:
        return await storage.users.find_one({"_id": parse_object_id(user_id)})

    @classmethod
    async def create_user(cls, storage: Storage, payload: Dict[str, Any]) -> InsertAck:
        result = await storage.users.insert_one(clean_payload(payload))
        logger.info("Registered user %s", result.inserted_id)
        return InsertAck.from_result(result)

    @classmethod
    async def update_user(cls, storage: Storage, user_id: str, payload: Dict[str, Any]) -> UpdateAck:
        oid = parse_object_id(user_id)
        result = await storage.users.update_one({"_id": oid}, {"$set": require_changes(payload)})
        logger.info("Updated user %s (matched=%s)", user_id, result.matched_count)
        return UpdateAck.from_result(result)

    @classmethod
    async def delete_user(cls, storage: Storage, user_id: str) -> DeleteAck:
        """Delete a user.  Their bookings and reviews are kept."""
        oid = parse_object_id(user_id)
        result = await storage.users.delete_one({"_id": oid})
        logger.info("Deleted user %s (deleted=%s)", user_id, result.deleted_count)
        return DeleteAck.from_result(result)
