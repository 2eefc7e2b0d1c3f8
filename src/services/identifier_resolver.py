from typing import Iterable, List, Union

from src.database import models
from src.repositories.interfaces import IRoleRepository, IPermissionRepository
from src.services.exceptions import RoleNotFoundError, PermissionNotFoundError

# 역할/권한은 이름(str) 또는 이미 조회한 모델 인스턴스로 가리킬 수 있습니다.
RoleRef = Union[str, models.Role]
PermissionRef = Union[str, models.Permission]


class IdentifierResolver:
    """역할/권한 참조(이름 또는 엔티티)를 저장된 엔티티와 그 ID로 변환합니다."""

    def __init__(self, role_repo: IRoleRepository, permission_repo: IPermissionRepository):
        self.role_repo = role_repo
        self.permission_repo = permission_repo

    def resolve_role(self, role: RoleRef) -> models.Role:
        """
        역할 참조 하나를 Role 인스턴스로 변환합니다.

        Raises:
            RoleNotFoundError: 해당 이름의 역할이 없을 때.
            ValueError: 아직 저장되지 않은(id가 없는) Role이 전달되었을 때.
            TypeError: 이름도 Role도 아닌 값이 전달되었을 때.
        """
        if isinstance(role, models.Role):
            return _require_saved(role)
        if isinstance(role, str):
            found = self.role_repo.find_by_name(role)
            if not found:
                raise RoleNotFoundError(f"Role '{role}' not found.")
            return found
        raise TypeError(f"Expected a role name or Role, got {type(role).__name__}.")

    def resolve_permission(self, permission: PermissionRef) -> models.Permission:
        """
        권한 참조 하나를 Permission 인스턴스로 변환합니다.

        Raises:
            PermissionNotFoundError: 해당 이름의 권한이 없을 때.
            ValueError: 아직 저장되지 않은(id가 없는) Permission이 전달되었을 때.
            TypeError: 이름도 Permission도 아닌 값이 전달되었을 때.
        """
        if isinstance(permission, models.Permission):
            return _require_saved(permission)
        if isinstance(permission, str):
            found = self.permission_repo.find_by_name(permission)
            if not found:
                raise PermissionNotFoundError(f"Permission '{permission}' not found.")
            return found
        raise TypeError(f"Expected a permission name or Permission, got {type(permission).__name__}.")

    def resolve_role_ids(self, roles: Iterable[RoleRef]) -> List[int]:
        """모든 참조를 먼저 변환한 뒤 중복 없는 ID 목록을 반환합니다. 하나라도 실패하면 예외가 전파됩니다."""
        return _unique_ids(self.resolve_role(role) for role in roles)

    def resolve_permission_ids(self, permissions: Iterable[PermissionRef]) -> List[int]:
        return _unique_ids(self.resolve_permission(permission) for permission in permissions)


def _require_saved(entity):
    if entity.id is None:
        raise ValueError(f"{type(entity).__name__} '{entity.name}' must be saved before it can be referenced.")
    return entity


def _unique_ids(entities) -> List[int]:
    return list(dict.fromkeys(entity.id for entity in entities))
