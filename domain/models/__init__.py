"""
Domain models package.
Document models for the MongoDB collections this service touches.
"""

from domain.models.user import Permissions, USER_BACKUP_FIELDS
from domain.models.restaurant import Location, RestaurantCreate, TRIAL_PERIOD_DAYS

__all__ = [
    "Permissions",
    "USER_BACKUP_FIELDS",
    "Location",
    "RestaurantCreate",
    "TRIAL_PERIOD_DAYS",
]
