"""
Permission Service - role-derived capability flags for users.
"""

import logging
from typing import Any, MutableMapping, Mapping, Optional

from domain.enums import UserRole
from domain.models import Permissions

logger = logging.getLogger("chefenplace.services.permissions")

VIEW_FLAGS = (
    "canViewRecipes",
    "canViewPlateups",
    "canViewNotifications",
    "canViewPanels",
)


class PermissionService:
    """Builds and checks the permissions object stored on user documents."""

    @staticmethod
    def head_chef_permissions() -> dict:
        return {flag: True for flag in Permissions.flag_names()}

    @staticmethod
    def view_only_permissions() -> dict:
        return {flag: flag in VIEW_FLAGS for flag in Permissions.flag_names()}

    @staticmethod
    def no_permissions() -> dict:
        return Permissions().to_document()

    @staticmethod
    def permissions_for_role(role: Optional[str]) -> dict:
        """
        Full permission set for a role.

        Head chefs get every flag, team members and plain users get the view
        flags only, anything else gets nothing.
        """
        if role == UserRole.HEAD_CHEF.value:
            return PermissionService.head_chef_permissions()
        if role in (UserRole.TEAM_MEMBER.value, UserRole.USER.value):
            return PermissionService.view_only_permissions()
        return PermissionService.no_permissions()

    @staticmethod
    def ensure_user_permissions(user: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Overwrite ``user["permissions"]`` with the set for its role."""
        user["permissions"] = PermissionService.permissions_for_role(user.get("role"))
        return user

    @staticmethod
    def validate_user_permissions(user: Optional[Mapping[str, Any]]) -> bool:
        """Check the key flag a user's role depends on."""
        if not user or not user.get("permissions"):
            return False

        permissions = user["permissions"]
        role = user.get("role")
        if role == UserRole.HEAD_CHEF.value:
            return permissions.get("canManageTeam") is True
        if role in (UserRole.TEAM_MEMBER.value, UserRole.USER.value):
            return permissions.get("canViewRecipes") is True
        return False

    @staticmethod
    def needs_team_management_fix(user: Mapping[str, Any]) -> bool:
        """A head chef whose permissions lack canManageTeam."""
        permissions = user.get("permissions") or {}
        return user.get("role") == UserRole.HEAD_CHEF.value and not permissions.get(
            "canManageTeam"
        )
