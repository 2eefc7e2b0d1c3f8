from .role import Role
from .permission import Permission
from .association import RoleHasPermission, ModelHasRole, ModelHasPermission
from .subject import HasRolesAndPermissions, subject_class_for
from .user import User

__all__ = [
    "Role",
    "Permission",
    "RoleHasPermission",
    "ModelHasRole",
    "ModelHasPermission",
    "HasRolesAndPermissions",
    "subject_class_for",
    "User",
]
