"""
Database connection and initialization
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a pooled MongoDB client for the configured URL"""
    return AsyncIOMotorClient(
        settings.mongo_url,
        maxPoolSize=100,
        minPoolSize=10,
        maxIdleTimeMS=30000,
        connectTimeoutMS=5000,
        serverSelectionTimeoutMS=5000,
        waitQueueTimeoutMS=10000
    )


async def create_database_indexes(db):
    """Create necessary indexes for optimal query performance"""
    logger.info("Creating database indexes...")
    try:
        # Invites collection indexes
        await db.invites.create_index("slug", unique=True)
        await db.invites.create_index([("created_at", -1)])
        logger.info("Database indexes created successfully")
    except PyMongoError as e:
        logger.error(f"Error creating indexes: {e}")
