from typing import Any, Optional, Tuple
import logging

from pymongo.database import Database

from domain.models import RestaurantCreate
from repositories import RestaurantRepository
from repositories.base import Document
from app.exceptions import ServiceValidationError

logger = logging.getLogger("chefenplace.restaurants")

DEFAULT_RESTAURANT = {
    "restaurantName": "Your Restaurant",
    "restaurantType": "Restaurant",
    "location": {
        "address": "123 Main St",
        "city": "Your City",
        "state": "Your State",
        "zipCode": "12345",
        "country": "United States",
    },
    "planType": "trial",
    "billingCycle": "monthly",
    "subscriptionStatus": "active",
    "isActive": True,
}


class RestaurantService:
    """Business logic for restaurant onboarding records"""

    @staticmethod
    def create_restaurant_for_head_chef(
        db: Database, head_chef_id: Any, data: Optional[dict] = None
    ) -> Tuple[Document, bool]:
        """
        Make sure a head chef owns a restaurant.

        Returns (restaurant, created). An existing restaurant is returned
        untouched with created=False.
        """
        if not head_chef_id:
            raise ServiceValidationError(
                "A head chef id is required", code="MISSING_HEAD_CHEF_ID"
            )

        repo = RestaurantRepository(db)
        existing = repo.find_by_head_chef(head_chef_id)
        if existing:
            logger.info(
                "restaurant_exists head_chef_id=%s name=%s",
                head_chef_id,
                existing.get("restaurantName"),
            )
            return existing, False

        payload = {**DEFAULT_RESTAURANT, **(data or {}), "headChefId": head_chef_id}
        restaurant = repo.create_restaurant(RestaurantCreate.model_validate(payload))
        logger.info(
            "restaurant_created id=%s name=%s",
            restaurant["_id"],
            restaurant["restaurantName"],
        )
        return restaurant, True
