"""
Catalog service: scheme and scholarship documents stored in MongoDB
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..adapters import merge_program_documents, program_from_document, program_to_document
from ..config import settings
from ..database import get_database
from ..models.program import LifecycleStatus, Program
from ..utils.validators import PROGRAM_KINDS, normalize_text, validate_program_kind

logger = logging.getLogger(__name__)

# Public listing tabs and the lifecycle status each one shows
STATUS_TABS = {
    "live": LifecycleStatus.ACTIVE,
    "upcoming": LifecycleStatus.UPCOMING,
    "always-open": LifecycleStatus.ALWAYS_OPEN,
}


def _id_filter(program_id: str) -> Dict[str, Any]:
    if ObjectId.is_valid(program_id):
        return {"_id": ObjectId(program_id)}
    return {"_id": program_id}


class CatalogService:
    """Service for scheme and scholarship catalog operations"""

    def __init__(self, database: AsyncIOMotorDatabase):
        self.db = database

    def _collection(self, kind: str):
        if not validate_program_kind(kind):
            raise ValueError(f"Unknown program kind: {kind}")
        if kind == "scholarship":
            return self.db[settings.scholarships_collection]
        return self.db[settings.schemes_collection]

    async def list_programs(self, kind: Optional[str] = None) -> List[Program]:
        """Get all programs, optionally only one kind, in stored order"""
        kinds = [kind] if kind else list(PROGRAM_KINDS)
        try:
            programs = []
            for current in kinds:
                cursor = self._collection(current).find({})
                async for doc in cursor:
                    programs.append(program_from_document(doc, current))
            return programs
        except Exception as e:
            logger.error(f"Failed to list programs: {e}")
            raise

    async def get_program(self, kind: str, program_id: str) -> Optional[Program]:
        """Get a program by its document ID"""
        try:
            doc = await self._collection(kind).find_one(_id_filter(program_id))
            if doc:
                return program_from_document(doc, kind)
            return None
        except Exception as e:
            logger.error(f"Failed to get {kind} {program_id}: {e}")
            raise

    async def create_program(self, kind: str, payload: Dict[str, Any]) -> Program:
        """Create a new program from an admin payload"""
        try:
            program = program_from_document(payload, kind)
            doc = program_to_document(program)
            now = datetime.now(timezone.utc)
            doc["createdAt"] = now
            doc["updatedAt"] = now

            result = await self._collection(kind).insert_one(doc)
            logger.info(f"{kind.capitalize()} created: {result.inserted_id}")
            return program.model_copy(update={"id": str(result.inserted_id)})
        except Exception as e:
            logger.error(f"Failed to create {kind}: {e}")
            raise

    async def update_program(self, kind: str, program_id: str, changes: Dict[str, Any]) -> Optional[Program]:
        """Apply a partial update; returns None when the program does not exist"""
        try:
            collection = self._collection(kind)
            existing = await collection.find_one(_id_filter(program_id))
            if not existing:
                return None

            merged = merge_program_documents(existing, changes, kind)
            program = program_from_document(merged, kind)
            doc = program_to_document(program)
            doc["updatedAt"] = datetime.now(timezone.utc)

            await collection.update_one(_id_filter(program_id), {"$set": doc})
            logger.info(f"{kind.capitalize()} updated: {program_id}")
            return program
        except Exception as e:
            logger.error(f"Failed to update {kind} {program_id}: {e}")
            raise

    async def delete_program(self, kind: str, program_id: str) -> bool:
        """Delete a program; returns False when nothing was deleted"""
        try:
            result = await self._collection(kind).delete_one(_id_filter(program_id))
            if result.deleted_count:
                logger.info(f"{kind.capitalize()} deleted: {program_id}")
            return result.deleted_count > 0
        except Exception as e:
            logger.error(f"Failed to delete {kind} {program_id}: {e}")
            raise

    async def set_status(self, kind: str, program_id: str, status: LifecycleStatus) -> Optional[Program]:
        """Move a program to another lifecycle status"""
        program = await self.get_program(kind, program_id)
        if program is None:
            return None
        label = program_to_document(program.model_copy(update={"lifecycle_status": status}))["status"]
        return await self.update_program(kind, program_id, {"status": label})

    async def toggle_status(self, kind: str, program_id: str) -> Optional[Program]:
        """Flip a program between Active and Draft, as the admin panel does"""
        program = await self.get_program(kind, program_id)
        if program is None:
            return None
        if program.lifecycle_status == LifecycleStatus.ACTIVE:
            new_status = LifecycleStatus.DRAFT
        else:
            new_status = LifecycleStatus.ACTIVE
        return await self.set_status(kind, program_id, new_status)


def filter_listing(
    programs: Iterable[Program],
    status_tab: str = "live",
    nav_category: Optional[str] = None,
    search: Optional[str] = None
) -> List[Program]:
    """
    Filter programs for the public listing pages

    Only published programs are listed. Unknown tabs fall back to "live".

    Args:
        programs: Catalog programs in display order
        status_tab: "live", "upcoming" or "always-open"
        nav_category: Only programs tagged with this browsing category
        search: Case-insensitive keyword matched against name, description,
            department and categories

    Returns:
        Matching programs, order preserved
    """
    wanted_status = STATUS_TABS.get(normalize_text(status_tab), LifecycleStatus.ACTIVE)
    category_key = normalize_text(nav_category)
    term = normalize_text(search)

    listed = []
    for program in programs:
        if not program.is_published or program.lifecycle_status != wanted_status:
            continue
        if category_key and category_key not in {normalize_text(c) for c in program.nav_categories}:
            continue
        if term:
            haystack = [program.name, program.description, program.department or ""]
            haystack.extend(program.nav_categories)
            if not any(term in normalize_text(text) for text in haystack):
                continue
        listed.append(program)
    return listed


def get_catalog_service() -> CatalogService:
    """FastAPI dependency returning a catalog service bound to the live database"""
    return CatalogService(get_database())
