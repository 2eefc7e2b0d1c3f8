import logging
from typing import List, Optional

from src import config
from src.database import models
from src.repositories.interfaces import (
    IRoleRepository, IPermissionRepository, IAssignmentRepository, ISubjectRepository
)
from src.services.access import RoleAccess, PermissionAccess, SubjectAccess
from src.services.exceptions import RoleAlreadyExistsError, PermissionAlreadyExistsError
from src.services.identifier_resolver import IdentifierResolver, RoleRef, PermissionRef

logger = logging.getLogger(__name__)


class AuthorizationService:
    """역할·권한의 생성/삭제와, 역할·권한·주체 단위의 권한 관리 객체를 제공합니다."""

    def __init__(
        self,
        role_repo: IRoleRepository,
        permission_repo: IPermissionRepository,
        role_permission_repo: IAssignmentRepository,
        subject_role_repo: IAssignmentRepository,
        subject_permission_repo: IAssignmentRepository,
        subject_repo: ISubjectRepository,
    ):
        """
        AuthorizationService를 초기화합니다.

        Args:
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
            permission_repo: 권한 데이터에 접근하기 위한 리포지토리.
            role_permission_repo: 역할-권한 연관(role_has_permissions) 리포지토리.
            subject_role_repo: 주체-역할 연관(model_has_roles) 리포지토리.
            subject_permission_repo: 주체-직접 권한 연관(model_has_permissions) 리포지토리.
            subject_repo: 연관 행의 (subject_type, subject_id)로 주체를 조회하는 리포지토리.
        """
        self.role_repo = role_repo
        self.permission_repo = permission_repo
        self.role_permission_repo = role_permission_repo
        self.subject_role_repo = subject_role_repo
        self.subject_permission_repo = subject_permission_repo
        self.subject_repo = subject_repo
        self.resolver = IdentifierResolver(role_repo, permission_repo)

    def create_role(self, name: str, description: Optional[str] = None, guard_name: Optional[str] = None) -> models.Role:
        """
        새로운 역할을 생성합니다.

        Raises:
            RoleAlreadyExistsError: 동일한 이름의 역할이 이미 존재할 때.
        """
        if self.role_repo.find_by_name(name):
            raise RoleAlreadyExistsError(f"Role with name '{name}' already exists.")
        role = models.Role(name=name, description=description, guard_name=guard_name or config.DEFAULT_GUARD_NAME)
        created_role = self.role_repo.create(role)
        logger.info("Created role '%s' (guard '%s').", created_role.name, created_role.guard_name)
        return created_role

    def create_permission(self, name: str, description: Optional[str] = None, guard_name: Optional[str] = None) -> models.Permission:
        """
        새로운 권한을 생성합니다.

        Raises:
            PermissionAlreadyExistsError: 동일한 이름의 권한이 이미 존재할 때.
        """
        if self.permission_repo.find_by_name(name):
            raise PermissionAlreadyExistsError(f"Permission with name '{name}' already exists.")
        permission = models.Permission(name=name, description=description, guard_name=guard_name or config.DEFAULT_GUARD_NAME)
        created_permission = self.permission_repo.create(permission)
        logger.info("Created permission '%s' (guard '%s').", created_permission.name, created_permission.guard_name)
        return created_permission

    def list_roles(self) -> List[models.Role]:
        return self.role_repo.list_all()

    def list_permissions(self) -> List[models.Permission]:
        return self.permission_repo.list_all()

    def delete_role(self, role: RoleRef) -> bool:
        """
        역할을 삭제합니다. 역할-권한, 주체-역할 연관 행도 함께 삭제됩니다.

        Raises:
            RoleNotFoundError: 해당 이름의 역할을 찾을 수 없을 때.
        """
        role = self.resolver.resolve_role(role)
        name = role.name
        self.role_repo.delete(role)
        logger.info("Deleted role '%s' and its assignments.", name)
        return True

    def delete_permission(self, permission: PermissionRef) -> bool:
        """
        권한을 삭제합니다. 역할-권한, 주체-직접 권한 연관 행도 함께 삭제됩니다.

        Raises:
            PermissionNotFoundError: 해당 이름의 권한을 찾을 수 없을 때.
        """
        permission = self.resolver.resolve_permission(permission)
        name = permission.name
        self.permission_repo.delete(permission)
        logger.info("Deleted permission '%s' and its assignments.", name)
        return True

    def role(self, role: RoleRef) -> RoleAccess:
        """역할 참조를 변환해 해당 역할의 권한 관리 객체를 반환합니다."""
        return RoleAccess(self.resolver.resolve_role(role), self)

    def permission(self, permission: PermissionRef) -> PermissionAccess:
        return PermissionAccess(self.resolver.resolve_permission(permission), self)

    def subject(self, subject: models.HasRolesAndPermissions) -> SubjectAccess:
        """저장된 주체(예: User)의 역할/권한 관리 객체를 반환합니다."""
        return SubjectAccess(subject, self)
