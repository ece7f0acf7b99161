"""
User Repository - Data access layer for user documents
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pymongo.database import Database

from repositories.base import BaseRepository, Document, to_object_id


class UserRepository(BaseRepository):
    """Repository for user data access"""

    collection_name = "users"

    def __init__(self, db: Database):
        super().__init__(db)

    def find_by_email(self, email: str) -> Optional[Document]:
        """Get user by email (stored lowercased)"""
        return self.collection.find_one({"email": email.strip().lower()})

    def find_by_role(self, role: str) -> List[Document]:
        """Get all users holding a role"""
        return list(self.collection.find({"role": role}))

    def save_permissions(self, user_id: Any, permissions: Document, **extra: Any) -> bool:
        """Persist a permissions object, plus any extra top-level fields"""
        fields = {"permissions": permissions, **extra}
        fields["updatedAt"] = datetime.now(timezone.utc)
        return self.update_fields(user_id, fields)

    def upsert_from_backup(self, record: Document) -> bool:
        """
        Restore one backed-up user.

        Returns True when an existing user was updated, False when a new one
        was inserted.
        """
        user_id = to_object_id(record["_id"])
        fields = {key: value for key, value in record.items() if key != "_id"}
        for key in ("headChef", "headChefId"):
            if fields.get(key):
                fields[key] = to_object_id(fields[key])
        result = self.collection.update_one(
            {"_id": user_id}, {"$set": fields}, upsert=True
        )
        return result.matched_count > 0
