"""
Business logic for the service catalogue.

Pet‑care services (grooming, walking, boarding ...) are stored in the
``services`` collection.  Their fields are opaque to the API: documents
are stored and returned as sent.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.db import Storage
from ..core.ids import parse_object_id
from ..schemas.ack import DeleteAck, InsertAck, UpdateAck
from .common import clean_payload, require_changes

logger = logging.getLogger(__name__)


class CatalogService:
    """CRUD operations on the ``services`` collection."""

    @classmethod
    async def list_services(cls, storage: Storage) -> List[Dict[str, Any]]:
        return await storage.services.find().to_list()

    @classmethod
    async def get_service(cls, storage: Storage, service_id: str) -> Optional[Dict[str, Any]]:
        """Return the service or ``None`` if it does not exist.

        Raises ``InvalidIdentifierError`` for malformed identifiers.
        """
        return await storage.services.find_one({"_id": parse_object_id(service_id)})

    @classmethod
    async def create_service(cls, storage: Storage, payload: Dict[str, Any]) -> InsertAck:
        result = await storage.services.insert_one(clean_payload(payload))
        logger.info("Created service %s", result.inserted_id)
        return InsertAck.from_result(result)

    @classmethod
    async def update_service(cls, storage: Storage, service_id: str, payload: Dict[str, Any]) -> UpdateAck:
        """Merge ``payload`` into the service; only supplied fields change."""
        oid = parse_object_id(service_id)
        result = await storage.services.update_one({"_id": oid}, {"$set": require_changes(payload)})
        logger.info(
            "Updated service %s (matched=%s, modified=%s)",
            service_id,
            result.matched_count,
            result.modified_count,
        )
        return UpdateAck.from_result(result)

    @classmethod
    async def delete_service(cls, storage: Storage, service_id: str) -> DeleteAck:
        """Delete a service.  Bookings and reviews referencing it are kept."""
        oid = parse_object_id(service_id)
        result = await storage.services.delete_one({"_id": oid})
        logger.info("Deleted service %s (deleted=%s)", service_id, result.deleted_count)
        return DeleteAck.from_result(result)
