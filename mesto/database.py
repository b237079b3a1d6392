"""MongoDB client lifecycle and database dependency."""

import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from mesto.config import Settings
from mesto.models.card import CARDS_COLLECTION
from mesto.models.user import USERS_COLLECTION

logger = logging.getLogger(__name__)


async def connect(settings: Settings) -> AsyncIOMotorClient:
    """Create the process-wide client and make sure indexes exist."""
    client = AsyncIOMotorClient(settings.mongo_url)
    db = client[settings.mongo_db_name]
    await init_indexes(db)
    logger.info(f"Connected to MongoDB database '{settings.mongo_db_name}'")
    return client


async def init_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes the application relies on."""
    await db[USERS_COLLECTION].create_index("email", unique=True)
    await db[CARDS_COLLECTION].create_index("owner")


def close(client: AsyncIOMotorClient) -> None:
    """Close the client; motor's close() is not a coroutine."""
    client.close()
    logger.info("MongoDB connection closed")


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Dependency that provides the database handle set up at startup."""
    return request.app.state.db
