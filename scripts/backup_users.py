"""
Back up user documents before a migration, or restore them from a backup.

Usage:
    python scripts/backup_users.py backup
    python scripts/backup_users.py restore <backup-file>
    python scripts/backup_users.py list
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import mongo_adapter
from app.config import settings
from services.user_service import UserService

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("chefenplace.scripts.backup_users")

USAGE = """Usage: backup_users.py <command> [options]

Commands:
  backup           create a backup of all users
  restore <file>   restore users from a backup file
  list             list available backup files"""


def backup() -> int:
    db = mongo_adapter.connect_with_retry()
    full_path, simple_path, summary = UserService.backup_users(db, settings.backup_dir)
    logger.info("Backup saved to %s", full_path)
    logger.info("Simple backup saved to %s", simple_path)
    for key, value in summary.items():
        logger.info("  %s: %d", key.replace("_", " "), value)
    return 0


def restore(backup_file: str) -> int:
    db = mongo_adapter.connect_with_retry()
    restored, errors = UserService.restore_users(db, backup_file)
    logger.info("Restored %d users, %d errors", restored, errors)
    return 1 if errors else 0


def list_backups() -> int:
    backups = UserService.list_backups(settings.backup_dir)
    if not backups:
        logger.info("No backup files found in %s", settings.backup_dir)
        return 0
    logger.info("Available backup files:")
    for index, entry in enumerate(backups, start=1):
        logger.info(
            "%d. %s (%.2f KB, modified %s)",
            index,
            entry["file"],
            entry["size_kb"],
            entry["modified"].isoformat(),
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    command = argv[0] if argv else None
    if command == "list":
        return list_backups()
    if command not in ("backup", "restore"):
        logger.info(USAGE)
        return 2
    if command == "restore" and len(argv) < 2:
        logger.error("Usage: backup_users.py restore <backup-file>")
        return 2

    try:
        if command == "restore":
            return restore(argv[1])
        return backup()
    except Exception:
        logger.exception("User backup script failed")
        return 1
    finally:
        mongo_adapter.close()


if __name__ == "__main__":
    sys.exit(main())
