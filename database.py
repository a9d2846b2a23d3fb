# backend/database.py
import logging

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

from core.config import settings
from services.collection_gateway import CollectionGateway

logger = logging.getLogger(__name__)

CATEGORIES = "categories"
SUBCATEGORIES = "subcategories"


async def connect_db() -> AsyncIOMotorClient:
    """Open the client and make sure the server answers before serving traffic."""
    client = AsyncIOMotorClient(settings.MONGO_URI)
    await client.admin.command("ping")
    await ensure_indexes(client[settings.MONGO_DB_NAME])
    logger.info("MongoDB connected (database=%s)", settings.MONGO_DB_NAME)
    return client


async def ensure_indexes(db: AsyncIOMotorDatabase):
    for name in (CATEGORIES, SUBCATEGORIES):
        try:
            await db[name].create_index("name", unique=True)
        except OperationFailure as exc:
            # existing duplicates block the index; keep serving
            logger.warning("Could not create unique name index on %s: %s", name, exc)


# Dependency to get the database handle created at startup
def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db


def get_categories(db: AsyncIOMotorDatabase = Depends(get_database)) -> CollectionGateway:
    return CollectionGateway(db[CATEGORIES])


def get_subcategories(db: AsyncIOMotorDatabase = Depends(get_database)) -> CollectionGateway:
    return CollectionGateway(db[SUBCATEGORIES])
