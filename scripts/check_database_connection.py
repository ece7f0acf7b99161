"""
Diagnostic script: show which database the environment points at and list
the users it holds.

Usage:
    python scripts/check_database_connection.py [email]
"""

import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter
from app.config import settings
from repositories import UserRepository

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("chefenplace.scripts.check_database_connection")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logger.info("MONGODB_URI: %s", "set" if os.getenv("MONGODB_URI") else "not set")
    logger.info("Environment: %s", settings.environment.value)
    logger.info("Connecting to %s", mongo_adapter.mask_uri(settings.mongodb_uri))

    try:
        db = mongo_adapter.connect_with_retry()
        status = mongo_adapter.get_connection_status()
        logger.info("Database %s on %s (%s)", status["name"], status["host"], status["state"])

        repo = UserRepository(db)
        if argv:
            user = repo.find_by_email(argv[0])
            if user:
                logger.info(
                    "User found: %s role=%s status=%s created=%s",
                    user["_id"], user.get("role"), user.get("status"), user.get("createdAt"),
                )
                return 0
            logger.warning("User %s not found in this database", argv[0])

        users = repo.find_all()
        if not users:
            logger.info("No users found")
        for i, user in enumerate(users, 1):
            logger.info("%d. %s (%s, %s)", i, user.get("email"), user.get("role"), user.get("status"))
        return 0
    except Exception as exc:
        logger.error("Connection failed: %s", exc)
        return 1
    finally:
        mongo_adapter.close()


if __name__ == "__main__":
    sys.exit(main())
