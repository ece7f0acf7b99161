"""
Tests for user maintenance: head chef permission repair, role-based
permission migration, and backup/restore.
"""

import json
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from services.user_service import UserService
from services.permission_service import PermissionService
from app.exceptions import NotFoundError, ServiceValidationError
from test_fixtures import make_db, make_user


def _set_calls(collection):
    """(filter, $set fields) for every update_one call"""
    return [(c.args[0], c.args[1]["$set"]) for c in collection.update_one.call_args_list]


# =============================================================================
# FIX HEAD CHEF PERMISSIONS
# =============================================================================


def test_fix_head_chef_permissions_updates_only_missing_flag():
    broken = make_user(permissions={"canViewRecipes": True})
    missing = make_user()
    healthy = make_user(permissions=PermissionService.head_chef_permissions())
    db = make_db()
    users = db.collections["users"]
    users.find.return_value = [broken, missing, healthy]
    users.update_one.return_value = MagicMock(matched_count=1)

    updated = UserService.fix_head_chef_permissions(db)

    assert updated == 2
    users.find.assert_called_once_with({"role": "head-chef"})
    calls = _set_calls(users)
    assert [f["_id"] for f, _ in calls] == [broken["_id"], missing["_id"]]
    for _, fields in calls:
        assert fields["permissions"] == PermissionService.head_chef_permissions()
        assert "updatedAt" in fields
    assert broken["permissions"]["canManageTeam"] is True


def test_fix_head_chef_permissions_with_no_head_chefs():
    db = make_db()
    db.collections["users"].find.return_value = []

    assert UserService.fix_head_chef_permissions(db) == 0
    db.collections["users"].update_one.assert_not_called()


def test_fix_head_chef_permissions_is_idempotent():
    db = make_db()
    users = db.collections["users"]
    users.find.return_value = [make_user(permissions={"canManageTeam": True})]

    assert UserService.fix_head_chef_permissions(db) == 0
    users.update_one.assert_not_called()


# =============================================================================
# MIGRATE USER PERMISSIONS
# =============================================================================


def test_migrate_user_permissions_summary_and_updates():
    head_chef = make_user(permissions={"canManageTeam": False})
    correct_member = make_user(
        role="user", permissions=PermissionService.view_only_permissions()
    )
    rejected_member = make_user(role="team-member", status="rejected")
    stranger = make_user(role="admin")
    db = make_db()
    users = db.collections["users"]
    users.find.return_value = [head_chef, correct_member, rejected_member, stranger]
    users.update_one.return_value = MagicMock(matched_count=1)

    summary = UserService.migrate_user_permissions(db)

    assert summary == {
        "total": 4,
        "head_chefs": 1,
        "team_members": 2,
        "updated": 2,
        "skipped": 1,
    }
    calls = dict((f["_id"], fields) for f, fields in _set_calls(users))
    assert set(calls) == {head_chef["_id"], rejected_member["_id"]}
    assert calls[head_chef["_id"]]["permissions"]["canAccessAdmin"] is True
    assert calls[rejected_member["_id"]]["status"] == "inactive"
    assert "status" not in calls[head_chef["_id"]]


# =============================================================================
# BACKUP AND RESTORE
# =============================================================================


def test_backup_users_writes_full_and_simple_files(tmp_path):
    head_chef_id = ObjectId()
    chef = make_user(permissions={"canManageTeam": True})
    member = make_user(role="user", headChef=head_chef_id, status=None, isActive=False)
    db = make_db()
    db.collections["users"].find.return_value = [chef, member]

    full_path, simple_path, summary = UserService.backup_users(db, tmp_path / "backups")

    assert full_path.parent == tmp_path / "backups"
    assert full_path.name.startswith("users-backup-")
    assert simple_path.name.startswith("users-simple-backup-")

    full = json.loads(full_path.read_text())
    assert full["totalUsers"] == 2
    assert full["migrationVersion"] == "1.0.0"
    assert full["users"][0]["_id"] == {"$oid": str(chef["_id"])}
    assert "password" not in full["users"][0]

    simple = json.loads(simple_path.read_text())
    assert simple["users"][1] == {
        "_id": str(member["_id"]),
        "email": member["email"],
        "name": "Lena Fischer",
        "role": "user",
        "status": "active",
        "headChef": str(head_chef_id),
        "isActive": False,
    }

    assert summary["total_users"] == 2
    assert summary["head_chefs"] == 1
    assert summary["team_members"] == 1
    assert summary["active_users"] == 1
    assert summary["with_head_chef"] == 1


def test_restore_users_round_trip_through_backup(tmp_path):
    chef = make_user()
    member = make_user(role="team-member", headChefId=chef["_id"])
    db = make_db()
    users = db.collections["users"]
    users.find.return_value = [chef, member]
    full_path, _, _ = UserService.backup_users(db, tmp_path)

    users.update_one.return_value = MagicMock(matched_count=0)
    restored, errors = UserService.restore_users(db, full_path)

    assert (restored, errors) == (2, 0)
    first_filter = users.update_one.call_args_list[0].args[0]
    assert first_filter == {"_id": chef["_id"]}
    first_fields = users.update_one.call_args_list[0].args[1]["$set"]
    for absent in ("headChef", "headChefId", "lastLogin", "permissions"):
        assert absent not in first_fields
    assert first_fields["avatar"] is None
    second_fields = users.update_one.call_args_list[1].args[1]["$set"]
    assert second_fields["headChefId"] == chef["_id"]
    assert users.update_one.call_args_list[0].kwargs["upsert"] is True


def test_restore_users_counts_failures(tmp_path):
    backup = tmp_path / "users.json"
    backup.write_text(
        json.dumps(
            {
                "users": [
                    {"_id": str(ObjectId()), "email": "ok@example.com"},
                    {"_id": str(ObjectId()), "email": "broken@example.com"},
                ]
            }
        )
    )
    db = make_db()
    db.collections["users"].update_one.side_effect = [
        MagicMock(matched_count=1),
        RuntimeError("write concern error"),
    ]

    assert UserService.restore_users(db, backup) == (1, 1)


def test_restore_users_missing_file(tmp_path):
    with pytest.raises(NotFoundError):
        UserService.restore_users(make_db(), tmp_path / "nope.json")


def test_restore_users_rejects_file_without_users(tmp_path):
    backup = tmp_path / "bad.json"
    backup.write_text(json.dumps({"timestamp": "2025-01-01"}))

    with pytest.raises(ServiceValidationError):
        UserService.restore_users(make_db(), backup)


def test_backup_omits_fields_the_user_never_had(tmp_path):
    db = make_db()
    db.collections["users"].find.return_value = [make_user()]

    full_path, _, _ = UserService.backup_users(db, tmp_path)

    record = json.loads(full_path.read_text())["users"][0]
    assert "headChef" not in record
    assert "lastLogin" not in record
    assert record["avatar"] is None


def test_list_backups_reports_size_and_time(tmp_path):
    (tmp_path / "users-backup-2025-01-01T00-00-00-000000Z.json").write_text("x" * 2048)
    (tmp_path / "notes.txt").write_text("not a backup")

    backups = UserService.list_backups(tmp_path)

    assert len(backups) == 1
    assert backups[0]["file"] == "users-backup-2025-01-01T00-00-00-000000Z.json"
    assert backups[0]["size_kb"] == 2.0
    assert backups[0]["modified"].tzinfo is not None


def test_list_backups_without_directory(tmp_path):
    assert UserService.list_backups(tmp_path / "missing") == []
