"""
Invite Store - MongoDB persistence for invites
Owns the stored document shape and slug assignment.
"""

import logging
from typing import Optional

from pymongo.errors import PyMongoError

from core.config import DEFAULT_TEMPLATE_KEY, SLUG_LENGTH
from models.invite import InviteCreate
from utils.helpers import generate_slug, utc_now_iso

logger = logging.getLogger(__name__)


class StorageFailure(Exception):
    """The database could not complete an invite read or write"""


class InviteStore:
    """
    Persistence for invite documents in the `invites` collection.

    Slugs are random and inserted without a uniqueness check; the unique
    index on `slug` turns a collision into a StorageFailure.
    """

    def __init__(self, db):
        self.collection = db.invites

    async def create(self, data: InviteCreate) -> dict:
        """Insert a new invite and return the stored document"""
        now = utc_now_iso()
        invite_doc = {
            "slug": generate_slug(SLUG_LENGTH),
            "event_category": data.event_category,
            "template_key": DEFAULT_TEMPLATE_KEY,
            "event_title": data.event_title,
            "primary_names": data.primary_names,
            "date": data.event_datetime,
            "time": data.event_time,
            "venue_name": data.venue_name,
            "address": data.address,
            "maps_url": data.maps_url,
            "custom_message": data.custom_message,
            "language": data.language,
            "view_count": 0,
            "created_at": now,
            "updated_at": now,
        }

        try:
            await self.collection.insert_one(invite_doc)
        except PyMongoError as e:
            logger.error(f"Failed to insert invite {invite_doc['slug']}: {e}")
            raise StorageFailure("Could not create invite") from e

        # Remove MongoDB _id before returning
        invite_doc.pop("_id", None)
        logger.info(f"Created invite {invite_doc['slug']} ({data.event_category})")
        return invite_doc

    async def find_by_slug(self, slug: str) -> Optional[dict]:
        """Get invite by slug, None when there is no match"""
        try:
            return await self.collection.find_one({"slug": slug}, {"_id": 0})
        except PyMongoError as e:
            logger.error(f"Failed to load invite {slug}: {e}")
            raise StorageFailure("Could not load invite") from e

    async def increment_view(self, slug: str) -> None:
        """Atomically bump view_count; unknown slugs are left alone"""
        try:
            await self.collection.update_one(
                {"slug": slug},
                {
                    "$inc": {"view_count": 1},
                    "$set": {"updated_at": utc_now_iso()}
                }
            )
        except PyMongoError as e:
            logger.error(f"Failed to record view for invite {slug}: {e}")
            raise StorageFailure("Could not record invite view") from e
