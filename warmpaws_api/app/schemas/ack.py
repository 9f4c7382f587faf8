"""
Acknowledgement schemas returned by write endpoints.

Write operations do not return the stored document.  Instead they
return the driver's acknowledgement, serialised with the same camelCase
keys existing clients already consume (``insertedId``,
``matchedCount`` ...).  An update or delete that matches nothing is a
normal acknowledgement with zero counts rather than an error.
"""

from typing import Optional

from pydantic import BaseModel
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class InsertAck(BaseModel):
    acknowledged: bool
    insertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAck":
        inserted_id = result.inserted_id
        return cls(
            acknowledged=result.acknowledged,
            insertedId=str(inserted_id) if inserted_id is not None else None,
        )


class UpdateAck(BaseModel):
    acknowledged: bool
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedId: Optional[str] = None
    upsertedCount: int = 0

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAck":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count or 0,
            upsertedId=str(upserted_id) if upserted_id is not None else None,
            upsertedCount=1 if upserted_id is not None else 0,
        )


class DeleteAck(BaseModel):
    acknowledged: bool
    deletedCount: int = 0

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
