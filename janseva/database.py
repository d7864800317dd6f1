import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from janseva.config import settings

logger = logging.getLogger(__name__)


class MongoDB:
    client: AsyncIOMotorClient = None
    database: AsyncIOMotorDatabase = None


db = MongoDB()


async def connect_to_mongo():
    """Create database connection"""
    try:
        db.client = AsyncIOMotorClient(settings.mongodb_url)
        db.database = db.client[settings.mongodb_db_name]

        # Test connection
        await db.client.admin.command('ping')
        logger.info("Connected to MongoDB successfully")

    except Exception as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        raise


async def close_mongo_connection():
    """Close database connection"""
    if db.client:
        db.client.close()
        db.client = None
        db.database = None
        logger.info("MongoDB connection closed")


def get_database() -> AsyncIOMotorDatabase:
    return db.database


async def ping() -> bool:
    """Check MongoDB connection health"""
    if db.client is None:
        return False
    try:
        await db.client.admin.command('ping')
        return True
    except Exception:
        return False
