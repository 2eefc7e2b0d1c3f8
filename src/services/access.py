import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, List

from sqlalchemy.exc import IntegrityError

from src.database import models
from src.services.exceptions import AssignmentConstraintError
from src.services.identifier_resolver import RoleRef, PermissionRef

if TYPE_CHECKING:
    from src.services.authorization_service import AuthorizationService

logger = logging.getLogger(__name__)


@contextmanager
def _assignment_constraints(action: str):
    """연관 행 추가 중 발생한 IntegrityError를 AssignmentConstraintError로 바꿉니다."""
    try:
        yield
    except IntegrityError as e:
        raise AssignmentConstraintError(f"Cannot {action}: {e.orig}") from e


class RoleAccess:
    """
    역할 하나에 묶여 그 역할의 권한을 조회·부여·회수합니다.
    AuthorizationService.role()로 생성합니다.
    """

    def __init__(self, role: models.Role, service: "AuthorizationService"):
        self.role = role
        self._service = service

    def permissions(self) -> List[models.Permission]:
        """역할에 연결된 모든 권한을 조회합니다."""
        permission_ids = self._service.role_permission_repo.all_for(self.role.id)
        return self._service.permission_repo.find_by_ids(permission_ids)

    def has_permission_to(self, permission: PermissionRef) -> bool:
        """
        역할이 특정 권한을 직접 가지고 있는지 확인합니다.

        Raises:
            PermissionNotFoundError: 해당 이름의 권한이 없을 때.
        """
        permission = self._service.resolver.resolve_permission(permission)
        return self._service.role_permission_repo.exists(self.role.id, permission.id)

    def give_permission_to(self, *permissions: PermissionRef) -> "RoleAccess":
        """
        역할에 하나 이상의 권한을 부여합니다. 이미 가진 권한은 중복되지 않습니다.
        모든 참조를 먼저 변환하므로, 하나라도 찾지 못하면 아무것도 부여하지 않습니다.

        Raises:
            PermissionNotFoundError: 해당 이름의 권한이 없을 때.
            AssignmentConstraintError: 삭제된 권한 등 DB 제약을 위반할 때.
        """
        permission_ids = self._service.resolver.resolve_permission_ids(permissions)
        with _assignment_constraints(f"grant permissions to role '{self.role.name}'"):
            self._service.role_permission_repo.link(self.role.id, permission_ids)
        logger.debug("Granted permission ids %s to role '%s'.", permission_ids, self.role.name)
        return self

    def revoke_permission_to(self, *permissions: PermissionRef) -> "RoleAccess":
        """역할에서 하나 이상의 권한을 회수합니다. 가지고 있지 않은 권한은 무시합니다."""
        permission_ids = self._service.resolver.resolve_permission_ids(permissions)
        self._service.role_permission_repo.unlink(self.role.id, permission_ids)
        logger.debug("Revoked permission ids %s from role '%s'.", permission_ids, self.role.name)
        return self

    def users(self) -> List[models.HasRolesAndPermissions]:
        """이 역할을 가진 모든 주체를 조회합니다."""
        keys = self._service.subject_role_repo.owners_of(self.role.id)
        return self._service.subject_repo.find_by_keys(keys)


class PermissionAccess:
    """권한 하나를 기준으로 그 권한을 가진 역할과 주체를 다룹니다."""

    def __init__(self, permission: models.Permission, service: "AuthorizationService"):
        self.permission = permission
        self._service = service

    def roles(self) -> List[models.Role]:
        role_ids = self._service.role_permission_repo.owners_of(self.permission.id)
        return self._service.role_repo.find_by_ids(role_ids)

    def users(self) -> List[models.HasRolesAndPermissions]:
        """이 권한을 직접 부여받은 주체를 조회합니다. 역할을 통한 보유자는 포함하지 않습니다."""
        keys = self._service.subject_permission_repo.owners_of(self.permission.id)
        return self._service.subject_repo.find_by_keys(keys)

    def assign_role(self, *roles: RoleRef) -> "PermissionAccess":
        """하나 이상의 역할에 이 권한을 부여합니다. 이미 부여된 역할은 건너뜁니다."""
        role_ids = self._service.resolver.resolve_role_ids(roles)
        with _assignment_constraints(f"assign permission '{self.permission.name}' to roles"):
            self._service.role_permission_repo.link_owners(role_ids, self.permission.id)
        logger.debug("Assigned permission '%s' to role ids %s.", self.permission.name, role_ids)
        return self

    def remove_role(self, *roles: RoleRef) -> "PermissionAccess":
        role_ids = self._service.resolver.resolve_role_ids(roles)
        self._service.role_permission_repo.unlink_owners(role_ids, self.permission.id)
        logger.debug("Removed permission '%s' from role ids %s.", self.permission.name, role_ids)
        return self


class SubjectAccess:
    """
    주체(HasRolesAndPermissions를 사용하는 모델) 하나의 역할과 직접 권한을 관리합니다.

    역할 집합과 직접 권한 집합은 서로 독립적인 두 연관 테이블에 저장됩니다.
    권한 확인(has_permission_to)은 직접 권한을 먼저 보고, 없으면 보유한 역할을
    순서대로 확인하다가 처음 일치하는 역할에서 멈춥니다.
    """

    def __init__(self, subject: models.HasRolesAndPermissions, service: "AuthorizationService"):
        if subject.id is None:
            raise ValueError(
                f"{type(subject).__name__} must be saved before roles or permissions can be managed."
            )
        self.subject = subject
        self.key = subject.subject_key
        self._service = service

    def roles(self) -> List[models.Role]:
        role_ids = self._service.subject_role_repo.all_for(self.key)
        return self._service.role_repo.find_by_ids(role_ids)

    def assign_role(self, *roles: RoleRef) -> "SubjectAccess":
        """
        주체에게 하나 이상의 역할을 부여합니다. 이미 가진 역할은 중복되지 않습니다.

        Raises:
            RoleNotFoundError: 해당 이름의 역할이 없을 때. (아무 역할도 부여되지 않음)
            AssignmentConstraintError: 삭제된 역할을 참조할 때.
        """
        role_ids = self._service.resolver.resolve_role_ids(roles)
        with _assignment_constraints(f"assign roles to {self.key}"):
            self._service.subject_role_repo.link(self.key, role_ids)
        logger.debug("Assigned role ids %s to subject %s.", role_ids, self.key)
        return self

    def remove_role(self, *roles: RoleRef) -> "SubjectAccess":
        role_ids = self._service.resolver.resolve_role_ids(roles)
        self._service.subject_role_repo.unlink(self.key, role_ids)
        logger.debug("Removed role ids %s from subject %s.", role_ids, self.key)
        return self

    def has_role(self, *roles: RoleRef) -> bool:
        """
        주체가 전달된 역할 중 하나라도 가지고 있으면 True를 반환합니다. (OR 조건)
        이름과 Role 인스턴스를 섞어 전달할 수 있습니다.

        Raises:
            RoleNotFoundError: 해당 이름의 역할이 없을 때.
        """
        role_ids = self._service.resolver.resolve_role_ids(roles)
        if not role_ids:
            return False
        held = set(self._service.subject_role_repo.all_for(self.key))
        return any(role_id in held for role_id in role_ids)

    def permissions(self) -> List[models.Permission]:
        """직접 부여된 권한만 조회합니다. 역할을 통해 얻은 권한은 포함하지 않습니다."""
        permission_ids = self._service.subject_permission_repo.all_for(self.key)
        return self._service.permission_repo.find_by_ids(permission_ids)

    def give_permission_to(self, *permissions: PermissionRef) -> "SubjectAccess":
        permission_ids = self._service.resolver.resolve_permission_ids(permissions)
        with _assignment_constraints(f"grant permissions to {self.key}"):
            self._service.subject_permission_repo.link(self.key, permission_ids)
        logger.debug("Granted permission ids %s to subject %s.", permission_ids, self.key)
        return self

    def revoke_permission_to(self, *permissions: PermissionRef) -> "SubjectAccess":
        permission_ids = self._service.resolver.resolve_permission_ids(permissions)
        self._service.subject_permission_repo.unlink(self.key, permission_ids)
        logger.debug("Revoked permission ids %s from subject %s.", permission_ids, self.key)
        return self

    def has_permission_to(self, permission: PermissionRef) -> bool:
        """
        주체가 특정 권한을 직접 또는 역할을 통해 가지고 있는지 확인합니다.

        Raises:
            PermissionNotFoundError: 해당 이름의 권한이 없을 때.
        """
        permission = self._service.resolver.resolve_permission(permission)
        if self._service.subject_permission_repo.exists(self.key, permission.id):
            return True
        return self._has_permission_through_role(permission)

    def _has_permission_through_role(self, permission: models.Permission) -> bool:
        for role in self.roles():
            if RoleAccess(role, self._service).has_permission_to(permission):
                return True
        return False
