"""
Migration script: reset every user's permissions to the set their role grants.

Usage:
    python scripts/migrate_user_permissions.py
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter
from app.config import settings
from services.user_service import UserService

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("chefenplace.scripts.migrate_user_permissions")


def main() -> int:
    try:
        db = mongo_adapter.connect_with_retry()
        summary = UserService.migrate_user_permissions(db)
        logger.info(
            "Processed %d users: %d head chefs, %d team members, %d updated, %d skipped",
            summary["total"],
            summary["head_chefs"],
            summary["team_members"],
            summary["updated"],
            summary["skipped"],
        )
        return 0
    except Exception:
        logger.exception("Error during migration")
        return 1
    finally:
        mongo_adapter.close()


if __name__ == "__main__":
    sys.exit(main())
