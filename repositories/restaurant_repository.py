"""
Restaurant Repository - Data access layer for restaurant documents
"""

from typing import Any, Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from repositories.base import BaseRepository, Document, to_object_id
from domain.models import RestaurantCreate
from app.exceptions import ConflictError


class RestaurantRepository(BaseRepository):
    """Repository for restaurant data access"""

    collection_name = "restaurants"

    def __init__(self, db: Database):
        super().__init__(db)

    def find_by_head_chef(self, head_chef_id: Any) -> Optional[Document]:
        """Each head chef owns at most one restaurant"""
        return self.collection.find_one({"headChefId": to_object_id(head_chef_id)})

    def create_restaurant(self, restaurant: RestaurantCreate) -> Document:
        """Insert a restaurant; a second one for the same head chef is a conflict"""
        document = restaurant.to_document()
        document["headChefId"] = to_object_id(document["headChefId"])
        try:
            return self.create(document)
        except DuplicateKeyError:
            raise ConflictError(
                f"Restaurant already exists for head chef {restaurant.head_chef_id}"
            )
