"""
MongoDB integration.

This module provides the ``Storage`` value that wraps the database
handle and its four collections, the ``connect_storage`` factory used
at application startup, and the ``get_storage`` FastAPI dependency that
hands the storage to request handlers.  The storage is created once in
the application lifespan and closed on shutdown; connection pooling is
left to the driver.
"""

import logging
from typing import Any, Optional

from bson import ObjectId
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class Storage:
    """Handle to the WarmPaws database and its collections."""

    def __init__(self, database: Any, client: Optional[AsyncMongoClient] = None) -> None:
        self.database = database
        self.client = client

    @property
    def services(self):
        return self.database["services"]

    @property
    def bookings(self):
        return self.database["bookings"]

    @property
    def reviews(self):
        return self.database["reviews"]

    @property
    def users(self):
        return self.database["users"]

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
            logger.info("MongoDB connection closed")


async def connect_storage(uri: str, db_name: str) -> Storage:
    """Create the Mongo client and return a ``Storage`` for ``db_name``.

    The server is pinged once so that a misconfigured connection string
    shows up in the logs at startup.  A failed ping is logged but does
    not prevent the application from starting; requests will surface
    the storage error individually.
    """
    client: AsyncMongoClient = AsyncMongoClient(uri, tz_aware=True)
    storage = Storage(client[db_name], client=client)
    try:
        await client.admin.command("ping")
        logger.info("MongoDB connected (database=%s)", db_name)
    except PyMongoError as e:
        logger.error("MongoDB connection error: %s", e)
    return storage


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the storage attached to the app."""
    return request.app.state.storage


def serialize(value: Any) -> Any:
    """Convert documents to JSON‑compatible data.

    ``ObjectId`` values become their hex string and datetimes are
    rendered in ISO 8601.
    """
    return jsonable_encoder(value, custom_encoder={ObjectId: str})
