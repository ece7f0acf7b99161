"""
Maintenance script: create the restaurant record for an existing head chef.

Does nothing when the head chef already owns a restaurant.

Usage:
    HEAD_CHEF_ID=<user id> python scripts/create_restaurant.py
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path to import from project
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter
from app.config import settings
from services.restaurant_service import RestaurantService

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("chefenplace.scripts.create_restaurant")


def main() -> int:
    try:
        db = mongo_adapter.connect_with_retry()
        restaurant, created = RestaurantService.create_restaurant_for_head_chef(
            db, settings.head_chef_id
        )
        if created:
            logger.info(
                "Restaurant created: %s (id %s)",
                restaurant["restaurantName"],
                restaurant["_id"],
            )
        else:
            logger.info("Restaurant already exists: %s", restaurant.get("restaurantName"))
        return 0
    except Exception:
        logger.exception("Error creating restaurant")
        return 1
    finally:
        mongo_adapter.close()


if __name__ == "__main__":
    sys.exit(main())
