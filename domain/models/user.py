"""
User-related document models.

User documents are stored with camelCase field names; the models here only
describe the parts this code reads or writes.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Permissions(BaseModel):
    """Flat set of boolean capability flags attached to a user"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Recipes
    can_view_recipes: bool = False
    can_edit_recipes: bool = False
    can_delete_recipes: bool = False
    can_update_recipes: bool = False

    # Plateups
    can_view_plateups: bool = False
    can_create_plateups: bool = False
    can_delete_plateups: bool = False
    can_update_plateups: bool = False

    # Notifications
    can_view_notifications: bool = False
    can_create_notifications: bool = False
    can_delete_notifications: bool = False
    can_update_notifications: bool = False

    # Panels
    can_view_panels: bool = False
    can_create_panels: bool = False
    can_delete_panels: bool = False
    can_update_panels: bool = False

    # Other
    can_manage_team: bool = False
    can_access_admin: bool = False

    @classmethod
    def flag_names(cls) -> list[str]:
        """Storage names of every flag, in declaration order"""
        return [field.alias for field in cls.model_fields.values()]

    @classmethod
    def from_document(cls, value: Mapping[str, Any] | None) -> "Permissions":
        return cls.model_validate(dict(value or {}))

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


# Fields copied into user backups, in the order they are written.
USER_BACKUP_FIELDS = (
    "_id",
    "email",
    "name",
    "role",
    "status",
    "headChef",
    "headChefId",
    "firstName",
    "lastName",
    "organization",
    "permissions",
    "avatar",
    "isActive",
    "lastLogin",
    "createdAt",
    "updatedAt",
)
