"""API routes package"""

from . import health

__all__ = ["health"]
