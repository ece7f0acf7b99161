"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Dict, List, Optional
from abc import ABC

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.database import Database

Document = Dict[str, Any]


def to_object_id(value: Any) -> Any:
    """Coerce a 24-hex string to ObjectId, leave anything else as is."""
    if isinstance(value, str):
        try:
            return ObjectId(value)
        except InvalidId:
            return value
    return value


class BaseRepository(ABC):
    """
    Base repository providing common document operations.
    All repositories should inherit from this class.
    """

    collection_name: str = ""

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = db[self.collection_name]

    def get_by_id(self, entity_id: Any) -> Optional[Document]:
        """Get document by _id"""
        return self.collection.find_one({"_id": to_object_id(entity_id)})

    def find_all(self, query: Optional[Document] = None) -> List[Document]:
        """Get all documents matching an optional filter"""
        return list(self.collection.find(query or {}))

    def count(self, query: Optional[Document] = None) -> int:
        return self.collection.count_documents(query or {})

    def create(self, document: Document) -> Document:
        """Insert a document and return it with its _id"""
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def update_fields(self, entity_id: Any, fields: Document) -> bool:
        """Set fields on one document; True if a document matched"""
        result = self.collection.update_one(
            {"_id": to_object_id(entity_id)}, {"$set": fields}
        )
        return result.matched_count > 0

    def exists(self, entity_id: Any) -> bool:
        """Check if document exists"""
        return self.get_by_id(entity_id) is not None
