"""Services package - Business logic layer"""

from services.permission_service import PermissionService
from services.restaurant_service import RestaurantService
from services.user_service import UserService

__all__ = [
    "PermissionService",
    "RestaurantService",
    "UserService",
]
