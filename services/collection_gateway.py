from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection


def utcnow() -> datetime:
    """Naive UTC timestamp truncated to milliseconds (BSON date precision)."""
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_object_id(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    # only the 24-char hex form is accepted from callers
    if not isinstance(value, str) or len(value) != 24:
        return None
    try:
        return ObjectId(value)
    except InvalidId:
        return None


class CollectionGateway:
    """Thin accessor over one MongoDB collection.

    Identifiers that are not valid ObjectIds never match a document, so
    lookups return None and mutations report no match.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_all(self, filter: Optional[dict] = None) -> list[dict]:
        cursor = self.collection.find(filter or {})
        return await cursor.to_list(length=None)

    async def find_one(self, id: Any) -> Optional[dict]:
        oid = to_object_id(id)
        if oid is None:
            return None
        return await self.collection.find_one({"_id": oid})

    async def insert(self, document: dict) -> dict:
        document = dict(document)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def update_fields(self, id: Any, fields: dict) -> bool:
        oid = to_object_id(id)
        if oid is None:
            return False
        update = {**fields, "updatedAt": utcnow()}
        result = await self.collection.update_one({"_id": oid}, {"$set": update})
        return result.matched_count > 0

    async def delete_one(self, id: Any) -> bool:
        oid = to_object_id(id)
        if oid is None:
            return False
        result = await self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    async def delete_many(self, filter: dict) -> int:
        result = await self.collection.delete_many(filter)
        return result.deleted_count
