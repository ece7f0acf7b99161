"""
Shared test fixtures and utilities for the Chef en Place test suite.

This module contains common mock objects, helper functions, and test client setup
that are reused across multiple test files to ensure consistency and reduce duplication.
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import MagicMock

from bson import ObjectId
from fastapi.testclient import TestClient

from main import app

# Lifespan is not entered, so no database connection is attempted
client = TestClient(app)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


REALISTIC_USERS = {
    "head-chef": {"firstName": "Marco", "lastName": "Rossi", "email_prefix": "marco.rossi"},
    "team-member": {"firstName": "Aiko", "lastName": "Tanaka", "email_prefix": "aiko.tanaka"},
    "user": {"firstName": "Lena", "lastName": "Fischer", "email_prefix": "lena.fischer"},
}


def make_user(role="head-chef", permissions=None, user_id=None, email=None, **fields):
    """
    Create a user document as pymongo returns it.

    Args:
        role: head-chef, team-member or user
        permissions: permissions mapping, omitted from the document when None
        user_id: ObjectId, generated when not provided
        email: generated from the realistic profile when not provided
        **fields: extra or overriding document fields

    Example:
        >>> chef = make_user()
        >>> chef["role"]
        'head-chef'
    """
    profile = REALISTIC_USERS.get(role, REALISTIC_USERS["user"])
    now = datetime.now(timezone.utc)
    user = {
        "_id": user_id or ObjectId(),
        "email": email or unique_email(profile["email_prefix"]),
        "firstName": profile["firstName"],
        "lastName": profile["lastName"],
        "name": f"{profile['firstName']} {profile['lastName']}",
        "password": "$2a$12$hashedpasswordvalue",
        "role": role,
        "status": "active",
        "organization": "Trattoria Rossi",
        "avatar": None,
        "isActive": True,
        "createdAt": now,
        "updatedAt": now,
    }
    if permissions is not None:
        user["permissions"] = permissions
    user.update(fields)
    return user


def make_db(**collections):
    """
    MagicMock standing in for a pymongo Database.

    ``db["users"]`` and ``db["restaurants"]`` return distinct MagicMock
    collections, reachable afterwards as ``db.collections[name]``.
    """
    cols = {"users": MagicMock(name="users"), "restaurants": MagicMock(name="restaurants")}
    cols.update(collections)
    db = MagicMock(name="db")
    db.__getitem__.side_effect = lambda name: cols[name]
    db.collections = cols
    return db
