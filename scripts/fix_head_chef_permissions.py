"""
One-time data migration: give head chefs missing canManageTeam their full
permission set. Safe to run multiple times.

Usage:
    python scripts/fix_head_chef_permissions.py
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter
from app.config import settings
from services.user_service import UserService

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("chefenplace.scripts.fix_head_chef_permissions")


def main() -> int:
    try:
        db = mongo_adapter.connect_with_retry()
        updated = UserService.fix_head_chef_permissions(db)
        logger.info("Done, %d head chefs updated", updated)
        return 0
    except Exception:
        logger.exception("Error fixing permissions")
        return 1
    finally:
        mongo_adapter.close()


if __name__ == "__main__":
    sys.exit(main())
