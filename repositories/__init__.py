"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.restaurant_repository import RestaurantRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "RestaurantRepository",
]
