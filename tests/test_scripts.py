"""
Tests for the maintenance and smoke scripts.

Each maintenance script must connect, run its operation, and always close
the connection; failures turn into a non-zero exit code instead of a traceback.
"""

from unittest.mock import MagicMock

import httpx
import pytest
from bson import ObjectId

from adapters import mongo_adapter
from app.config import settings
from scripts import (
    backup_users,
    create_restaurant,
    fix_head_chef_permissions,
    migrate_user_permissions,
    smoke_registration,
    smoke_stripe_checkout,
)
from test_fixtures import make_db, make_user


@pytest.fixture
def fake_db(monkeypatch):
    db = make_db()
    closed = []
    monkeypatch.setattr(mongo_adapter, "connect_with_retry", lambda *a, **k: db)
    monkeypatch.setattr(mongo_adapter, "close", lambda: closed.append(True))
    db.closed = closed
    return db


@pytest.fixture
def unreachable_db(monkeypatch):
    closed = []

    def refuse(*args, **kwargs):
        raise ConnectionError("connection refused")

    monkeypatch.setattr(mongo_adapter, "connect_with_retry", refuse)
    monkeypatch.setattr(mongo_adapter, "close", lambda: closed.append(True))
    return closed


def test_fix_head_chef_permissions_script(fake_db):
    users = fake_db.collections["users"]
    users.find.return_value = [make_user()]
    users.update_one.return_value = MagicMock(matched_count=1)

    assert fix_head_chef_permissions.main() == 0
    users.update_one.assert_called_once()
    assert fake_db.closed == [True]


def test_fix_head_chef_permissions_script_connection_failure(unreachable_db):
    assert fix_head_chef_permissions.main() == 1
    assert unreachable_db == [True]


def test_migrate_user_permissions_script(fake_db):
    fake_db.collections["users"].find.return_value = []

    assert migrate_user_permissions.main() == 0
    assert fake_db.closed == [True]


def test_create_restaurant_script_uses_configured_head_chef(monkeypatch, fake_db):
    head_chef_id = ObjectId()
    monkeypatch.setattr(settings, "head_chef_id", str(head_chef_id))
    restaurants = fake_db.collections["restaurants"]
    restaurants.find_one.return_value = None
    restaurants.insert_one.return_value = MagicMock(inserted_id=ObjectId())

    assert create_restaurant.main() == 0
    assert restaurants.insert_one.call_args.args[0]["headChefId"] == head_chef_id
    assert fake_db.closed == [True]


def test_create_restaurant_script_without_head_chef(monkeypatch, fake_db):
    monkeypatch.setattr(settings, "head_chef_id", None)

    assert create_restaurant.main() == 1
    fake_db.collections["restaurants"].insert_one.assert_not_called()
    assert fake_db.closed == [True]


def test_backup_users_script_writes_backup(monkeypatch, tmp_path, fake_db):
    monkeypatch.setattr(settings, "backup_dir", str(tmp_path))
    fake_db.collections["users"].find.return_value = [make_user()]

    assert backup_users.main(["backup"]) == 0
    assert len(list(tmp_path.glob("users-backup-*.json"))) == 1
    assert len(list(tmp_path.glob("users-simple-backup-*.json"))) == 1


def test_backup_users_restore_requires_file(fake_db):
    assert backup_users.main(["restore"]) == 2


def test_backup_users_list_does_not_connect(monkeypatch, tmp_path, unreachable_db):
    monkeypatch.setattr(settings, "backup_dir", str(tmp_path))
    (tmp_path / "users-backup-1.json").write_text("{}")

    assert backup_users.main(["list"]) == 0
    assert list(tmp_path.glob("users-backup-*.json")) == [tmp_path / "users-backup-1.json"]


@pytest.mark.parametrize("argv", [[], ["bakup"], ["--help"]])
def test_backup_users_unknown_command_prints_usage(monkeypatch, tmp_path, unreachable_db, argv):
    monkeypatch.setattr(settings, "backup_dir", str(tmp_path))

    assert backup_users.main(argv) == 2
    assert list(tmp_path.iterdir()) == []
    assert unreachable_db == []


def test_backup_users_restore_missing_file(tmp_path, fake_db):
    assert backup_users.main(["restore", str(tmp_path / "missing.json")]) == 1
    assert fake_db.closed == [True]


# =============================================================================
# SMOKE SCRIPTS
# =============================================================================


def test_registration_payloads_use_unique_emails():
    restaurant = smoke_registration.restaurant_payload(1700000000000)
    legacy = smoke_registration.legacy_payload(1700000000000)

    assert restaurant["headChefEmail"] == "test-chef-1700000000000@example.com"
    assert restaurant["location"]["zipCode"] == "12345"
    assert legacy["role"] == "head-chef"
    assert legacy["email"] != restaurant["headChefEmail"]


def test_post_register_prints_outcome(capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/auth/register"
        return httpx.Response(
            201, json={"user": {"id": "1"}, "restaurant": {"restaurantName": "Test Restaurant"}}
        )

    with httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(handler)) as c:
        smoke_registration.post_register(c, "restaurant format", {"restaurantName": "x"})

    out = capsys.readouterr().out
    assert "status=201" in out
    assert "restaurant name: Test Restaurant" in out


def test_post_register_reports_errors(capsys):
    transport = httpx.MockTransport(
        lambda request: httpx.Response(400, json={"message": "Email taken", "code": "EMAIL_EXISTS"})
    )

    with httpx.Client(base_url="http://testserver", transport=transport) as c:
        smoke_registration.post_register(c, "legacy format", {})

    assert "status=400" in capsys.readouterr().out


def test_post_register_handles_non_json_reply(capsys):
    transport = httpx.MockTransport(
        lambda request: httpx.Response(502, text="<html>Bad Gateway</html>")
    )

    with httpx.Client(base_url="http://testserver", transport=transport) as c:
        smoke_registration.post_register(c, "restaurant format", {})

    out = capsys.readouterr().out
    assert "status=502" in out
    assert "Bad Gateway" in out


def test_checkout_payload_points_at_frontend():
    payload = smoke_stripe_checkout.checkout_payload(42)

    assert payload["headChefEmail"] == "testfix42@example.com"
    assert payload["success_url"].startswith(settings.frontend_url)
    assert payload["success_url"].endswith("session_id={CHECKOUT_SESSION_ID}")
    assert payload["planType"] == "pro"


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"code": "EMAIL_EXISTS"}, "email already registered"),
        ({"code": "CREATION_ERROR"}, "failed to create"),
        ({"code": "CHECKOUT_ERROR"}, "error code: CHECKOUT_ERROR"),
    ],
)
def test_describe_checkout_error(body, expected):
    assert expected in smoke_stripe_checkout.describe_error(body)
