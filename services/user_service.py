"""User maintenance service: permission repairs, migrations and backups"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Tuple
import json
import logging

from bson import json_util
from pymongo.database import Database

from domain.enums import UserRole, UserStatus
from domain.models import USER_BACKUP_FIELDS
from repositories import UserRepository
from services.permission_service import PermissionService
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("chefenplace.users")

MIGRATION_VERSION = "1.0.0"
SIMPLE_BACKUP_FIELDS = ("_id", "email", "name", "role", "status", "headChef", "isActive")


def _display_name(user: Dict[str, Any]) -> str:
    name = f"{user.get('firstName') or ''} {user.get('lastName') or ''}".strip()
    return name or user.get("name") or "?"


class UserService:
    """Maintenance operations over existing user documents"""

    @staticmethod
    def fix_head_chef_permissions(db: Database) -> int:
        """
        Give every head chef missing canManageTeam the full head-chef set.

        Returns the number of head chefs updated.
        """
        repo = UserRepository(db)
        head_chefs = repo.find_by_role(UserRole.HEAD_CHEF.value)
        logger.info("Found %d head chefs", len(head_chefs))
        if not head_chefs:
            logger.warning("No head chefs found")
            return 0

        updated = 0
        for head_chef in head_chefs:
            label = f"{_display_name(head_chef)} ({head_chef.get('email')})"
            if not PermissionService.needs_team_management_fix(head_chef):
                logger.info("Permissions already correct for %s", label)
                continue
            permissions = PermissionService.head_chef_permissions()
            repo.save_permissions(head_chef["_id"], permissions)
            head_chef["permissions"] = permissions
            updated += 1
            logger.info("Fixed permissions for %s", label)

        logger.info("Fixed permissions for %d head chefs", updated)
        return updated

    @staticmethod
    def migrate_user_permissions(db: Database) -> Dict[str, int]:
        """Rewrite every user's permissions from their role.

        Users with an unknown role are skipped. A legacy ``rejected`` status is
        rewritten to ``inactive`` on users that get updated.
        """
        repo = UserRepository(db)
        users = repo.find_all()
        summary = {"total": len(users), "head_chefs": 0, "team_members": 0, "updated": 0, "skipped": 0}

        for user in users:
            role = user.get("role")
            if role == UserRole.HEAD_CHEF.value:
                summary["head_chefs"] += 1
            elif role in (UserRole.TEAM_MEMBER.value, UserRole.USER.value):
                summary["team_members"] += 1
            else:
                logger.warning("Unknown role %r for %s, skipping", role, user.get("email"))
                summary["skipped"] += 1
                continue

            permissions = PermissionService.permissions_for_role(role)
            if user.get("permissions") == permissions:
                continue

            extra = {}
            if user.get("status") == "rejected":
                extra["status"] = UserStatus.INACTIVE.value
            repo.save_permissions(user["_id"], permissions, **extra)
            summary["updated"] += 1
            logger.info("Updated permissions for %s", user.get("email"))

        logger.info("Permission migration summary: %s", summary)
        return summary

    @staticmethod
    def backup_users(db: Database, backup_dir: str | Path) -> Tuple[Path, Path, Dict[str, int]]:
        """
        Write a full and a simple JSON backup of every user.

        Returns (full_backup_path, simple_backup_path, summary).
        """
        repo = UserRepository(db)
        users = repo.find_all()
        logger.info("Backing up %d users", len(users))

        backup_dir = Path(backup_dir)
        backup_dir.mkdir(parents=True, exist_ok=True)
        now = datetime.now(timezone.utc)
        stamp = now.strftime("%Y-%m-%dT%H-%M-%S-%fZ")

        full = {
            "timestamp": now.isoformat(),
            "totalUsers": len(users),
            "migrationVersion": MIGRATION_VERSION,
            "users": [
                {key: user[key] for key in USER_BACKUP_FIELDS if key in user} for user in users
            ],
        }
        simple = {
            "timestamp": now.isoformat(),
            "users": [
                {
                    "_id": str(user["_id"]),
                    "email": user.get("email"),
                    "name": user.get("name"),
                    "role": user.get("role"),
                    "status": user.get("status") or UserStatus.ACTIVE.value,
                    "headChef": str(user["headChef"]) if user.get("headChef") else None,
                    "isActive": user.get("isActive"),
                }
                for user in users
            ],
        }

        full_path = backup_dir / f"users-backup-{stamp}.json"
        simple_path = backup_dir / f"users-simple-backup-{stamp}.json"
        full_path.write_text(json_util.dumps(full, indent=2), encoding="utf-8")
        simple_path.write_text(json.dumps(simple, indent=2), encoding="utf-8")
        logger.info("Backup saved to %s", full_path)

        summary = {
            "total_users": len(users),
            "head_chefs": sum(1 for u in users if u.get("role") == UserRole.HEAD_CHEF.value),
            "team_members": sum(1 for u in users if u.get("role") == UserRole.USER.value),
            "active_users": sum(1 for u in users if u.get("isActive")),
            "with_status": sum(1 for u in users if u.get("status")),
            "with_head_chef": sum(1 for u in users if u.get("headChef")),
            "with_first_name": sum(1 for u in users if u.get("firstName")),
            "with_last_name": sum(1 for u in users if u.get("lastName")),
        }
        return full_path, simple_path, summary

    @staticmethod
    def restore_users(db: Database, backup_file: str | Path) -> Tuple[int, int]:
        """Upsert users from a backup file. Returns (restored, errors)."""
        path = Path(backup_file)
        if not path.exists():
            raise NotFoundError(f"Backup file not found: {path}")

        data = json_util.loads(path.read_text(encoding="utf-8"))
        records = data.get("users")
        if not isinstance(records, list):
            raise ServiceValidationError(f"Backup file has no users list: {path}")

        repo = UserRepository(db)
        restored = errors = 0
        for record in records:
            try:
                updated = repo.upsert_from_backup(record)
                restored += 1
                logger.info("%s user %s", "Updated" if updated else "Created", record.get("email"))
            except Exception as exc:
                errors += 1
                logger.error("Error restoring user %s: %s", record.get("email"), exc)

        logger.info("Restored %d users with %d errors", restored, errors)
        return restored, errors

    @staticmethod
    def list_backups(backup_dir: str | Path) -> List[Dict[str, Any]]:
        """Backup files in backup_dir with their size in KB and modification time."""
        backup_dir = Path(backup_dir)
        if not backup_dir.is_dir():
            return []
        backups = []
        for path in sorted(backup_dir.glob("*.json")):
            stats = path.stat()
            backups.append(
                {
                    "file": path.name,
                    "size_kb": round(stats.st_size / 1024, 2),
                    "modified": datetime.fromtimestamp(stats.st_mtime, timezone.utc),
                }
            )
        return backups
