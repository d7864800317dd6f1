"""
Profile service: user eligibility profiles stored in MongoDB
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..adapters import profile_from_document, profile_to_document
from ..config import settings
from ..database import get_database
from ..models.profile import UserProfile

logger = logging.getLogger(__name__)


class ProfileNotFoundError(Exception):
    """Raised when a user has not saved a profile yet"""

    def __init__(self, user_id: str):
        super().__init__(f"Profile not found for user: {user_id}")
        self.user_id = user_id


class ProfileService:
    """Service for user profile operations"""

    def __init__(self, database: AsyncIOMotorDatabase):
        self.db = database

    @property
    def users(self):
        return self.db[settings.users_collection]

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile, or None if they have not saved one"""
        try:
            doc = await self.users.find_one({"user_id": user_id})
            if doc and doc.get("profile") is not None:
                return profile_from_document(doc["profile"])
            return None
        except Exception as e:
            logger.error(f"Failed to get profile for {user_id}: {e}")
            raise

    async def save_profile(self, user_id: str, profile: UserProfile) -> UserProfile:
        """Create or update a user's profile"""
        try:
            user_data = {
                "user_id": user_id,
                "profile": profile_to_document(profile),
                "lastUpdated": datetime.now(timezone.utc)
            }

            await self.users.update_one(
                {"user_id": user_id},
                {"$set": user_data},
                upsert=True
            )
            logger.info(f"User profile created/updated: {user_id}")
            return profile
        except Exception as e:
            logger.error(f"Failed to save profile for {user_id}: {e}")
            raise


def get_profile_service() -> ProfileService:
    """FastAPI dependency returning a profile service bound to the live database"""
    return ProfileService(get_database())
