# tests/services/test_identifier_resolver.py
import pytest
from unittest.mock import MagicMock

from src.services.identifier_resolver import IdentifierResolver
from src.services.exceptions import NotFoundError, RoleNotFoundError, PermissionNotFoundError
from src.repositories.interfaces import IRoleRepository, IPermissionRepository
from src.database import models

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def mock_role_repo() -> MagicMock:
    """IRoleRepository에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=IRoleRepository)

@pytest.fixture
def mock_permission_repo() -> MagicMock:
    """IPermissionRepository에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=IPermissionRepository)

@pytest.fixture
def resolver(mock_role_repo: MagicMock, mock_permission_repo: MagicMock) -> IdentifierResolver:
    return IdentifierResolver(mock_role_repo, mock_permission_repo)

# ===================================================================
#  단일 참조 변환 테스트
# ===================================================================
class TestResolveSingle:
    def test_resolve_role_by_name(self, resolver: IdentifierResolver, mock_role_repo: MagicMock):
        """이름으로 전달된 역할은 리포지토리에서 조회합니다."""
        # === Arrange ===
        editor = models.Role(id=3, name="editor")
        mock_role_repo.find_by_name.return_value = editor

        # === Act ===
        role = resolver.resolve_role("editor")

        # === Assert ===
        assert role is editor
        mock_role_repo.find_by_name.assert_called_once_with("editor")

    def test_resolve_role_by_entity_skips_lookup(self, resolver: IdentifierResolver, mock_role_repo: MagicMock):
        """엔티티로 전달된 역할은 조회 없이 그대로 사용합니다."""
        editor = models.Role(id=3, name="editor")

        assert resolver.resolve_role(editor) is editor
        mock_role_repo.find_by_name.assert_not_called()

    def test_unknown_permission_name_raises_not_found(self, resolver: IdentifierResolver, mock_permission_repo: MagicMock):
        """존재하지 않는 권한 이름은 PermissionNotFoundError(NotFoundError)를 발생시킵니다."""
        # === Arrange ===
        mock_permission_repo.find_by_name.return_value = None

        # === Act & Assert ===
        with pytest.raises(PermissionNotFoundError, match="nonexistent-permission"):
            resolver.resolve_permission("nonexistent-permission")
        assert issubclass(PermissionNotFoundError, NotFoundError)

    def test_unsaved_entity_is_rejected_on_single_reference(self, resolver: IdentifierResolver):
        """단일 참조에서도 id가 없는 엔티티는 ValueError를 발생시킵니다."""
        with pytest.raises(ValueError, match="must be saved"):
            resolver.resolve_permission(models.Permission(name="draft"))
        with pytest.raises(ValueError, match="must be saved"):
            resolver.resolve_role(models.Role(name="draft"))

    def test_unsupported_reference_type_raises_type_error(self, resolver: IdentifierResolver):
        with pytest.raises(TypeError):
            resolver.resolve_role(42)

# ===================================================================
#  여러 참조 변환 테스트
# ===================================================================
class TestResolveMany:
    def test_mixed_references_resolve_to_unique_ids(self, resolver: IdentifierResolver, mock_role_repo: MagicMock):
        """이름과 엔티티를 섞어 전달해도 순서를 유지한 중복 없는 ID 목록을 돌려줍니다."""
        # === Arrange ===
        editor = models.Role(id=3, name="editor")
        admin = models.Role(id=1, name="admin")
        mock_role_repo.find_by_name.return_value = editor

        # === Act ===
        role_ids = resolver.resolve_role_ids(["editor", admin, editor])

        # === Assert ===
        assert role_ids == [3, 1]

    def test_fails_when_any_reference_is_unknown(self, resolver: IdentifierResolver, mock_role_repo: MagicMock):
        """하나라도 찾지 못하면 전체가 실패합니다."""
        # 시나리오: 첫 번째 이름은 존재하고, 두 번째 이름은 존재하지 않음
        mock_role_repo.find_by_name.side_effect = [models.Role(id=3, name="editor"), None]

        with pytest.raises(RoleNotFoundError, match="ghost"):
            resolver.resolve_role_ids(["editor", "ghost"])

    def test_unsaved_entity_is_rejected(self, resolver: IdentifierResolver):
        """아직 저장되지 않아 id가 없는 엔티티는 ValueError를 발생시킵니다."""
        with pytest.raises(ValueError, match="must be saved"):
            resolver.resolve_permission_ids([models.Permission(name="draft")])

    def test_empty_references_return_empty_list(self, resolver: IdentifierResolver):
        assert resolver.resolve_permission_ids([]) == []
