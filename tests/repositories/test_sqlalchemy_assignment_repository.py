# tests/repositories/test_sqlalchemy_assignment_repository.py
import pytest
from unittest.mock import MagicMock
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import IntegrityError

from src.repositories.sqlalchemy.sqlalchemy_assignment_repository import (
    SqlalchemyRolePermissionRepository, SqlalchemySubjectRoleRepository
)
from src.database import models


@pytest.fixture
def role(db_session) -> models.Role:
    role = models.Role(name="editor")
    db_session.add(role)
    db_session.commit()
    return role


@pytest.fixture
def permissions(db_session):
    items = [models.Permission(name=name) for name in ("read", "write", "delete")]
    db_session.add_all(items)
    db_session.commit()
    return items


@pytest.fixture
def role_permissions(db_session) -> SqlalchemyRolePermissionRepository:
    return SqlalchemyRolePermissionRepository(db_session)


class TestLink:
    def test_link_inserts_missing_pairs_only(self, role_permissions, role, permissions, db_session):
        read, write, _ = permissions
        role_permissions.link(role.id, [read.id])

        # 이미 존재하는 read와 새 write를 함께 추가
        role_permissions.link(role.id, [read.id, write.id])

        assert sorted(role_permissions.all_for(role.id)) == sorted([read.id, write.id])
        assert db_session.query(models.RoleHasPermission).count() == 2

    def test_link_with_empty_targets_is_noop(self, role_permissions, role):
        role_permissions.link(role.id, [])

        assert role_permissions.all_for(role.id) == []

    def test_link_to_missing_target_raises_and_rolls_back(self, role_permissions, role, db_session):
        """존재하지 않는 권한을 참조하면 외래 키 제약으로 IntegrityError가 발생합니다."""
        with pytest.raises(IntegrityError):
            role_permissions.link(role.id, [999])

        # 롤백 후에도 세션은 계속 사용할 수 있음
        assert role_permissions.all_for(role.id) == []

    def test_duplicate_insert_is_ignored_by_store(self, role_permissions, role, permissions, db_session):
        """all_for 확인을 지나친 경쟁 상황에서도 ON CONFLICT DO NOTHING이 중복을 막습니다."""
        read = permissions[0]
        role_permissions.link(role.id, [read.id])

        db_session.execute(role_permissions._insert_statement([{"role_id": role.id, "permission_id": read.id}]))
        db_session.commit()

        assert db_session.query(models.RoleHasPermission).count() == 1

    def test_mysql_insert_ignores_duplicate_keys_only(self):
        """MySQL에서는 ON DUPLICATE KEY UPDATE로 중복 쌍만 무시합니다."""
        # === Arrange ===
        session = MagicMock()
        session.get_bind.return_value.dialect.name = "mysql"
        repo = SqlalchemyRolePermissionRepository(session)

        # === Act ===
        statement = repo._insert_statement([{"role_id": 1, "permission_id": 2}])

        # === Assert ===
        sql = str(statement.compile(dialect=mysql.dialect()))
        assert "ON DUPLICATE KEY UPDATE" in sql
        assert "IGNORE" not in sql


class TestLinkOwners:
    def test_link_owners_inserts_missing_owners_only(self, role_permissions, role, permissions, db_session):
        read = permissions[0]
        other = models.Role(name="admin")
        db_session.add(other)
        db_session.commit()
        role_permissions.link(role.id, [read.id])

        role_permissions.link_owners([role.id, other.id, other.id], read.id)

        assert sorted(role_permissions.owners_of(read.id)) == sorted([role.id, other.id])
        assert db_session.query(models.RoleHasPermission).count() == 2

    def test_link_owners_is_all_or_nothing(self, role_permissions, role, permissions):
        """존재하지 않는 역할이 섞여 있으면 어떤 쌍도 추가되지 않습니다."""
        read = permissions[0]

        with pytest.raises(IntegrityError):
            role_permissions.link_owners([role.id, 999], read.id)

        assert role_permissions.owners_of(read.id) == []

    def test_unlink_owners_with_polymorphic_keys(self, db_session, role):
        subject_roles = SqlalchemySubjectRoleRepository(db_session)
        subject_roles.link_owners([("user", 1), ("user", 2), ("service_account", 1)], role.id)

        subject_roles.unlink_owners([("user", 1), ("service_account", 1), ("user", 9)], role.id)

        assert subject_roles.owners_of(role.id) == [("user", 2)]


class TestUnlinkAndQueries:
    def test_unlink_ignores_missing_pairs(self, role_permissions, role, permissions):
        read, write, delete = permissions
        role_permissions.link(role.id, [read.id, write.id])

        role_permissions.unlink(role.id, [write.id, delete.id])

        assert role_permissions.all_for(role.id) == [read.id]

    def test_exists(self, role_permissions, role, permissions):
        read, write, _ = permissions
        role_permissions.link(role.id, [read.id])

        assert role_permissions.exists(role.id, read.id) is True
        assert role_permissions.exists(role.id, write.id) is False

    def test_owners_of_returns_scalar_ids(self, role_permissions, role, permissions, db_session):
        other = models.Role(name="admin")
        db_session.add(other)
        db_session.commit()
        read = permissions[0]
        role_permissions.link(role.id, [read.id])
        role_permissions.link(other.id, [read.id])

        assert sorted(role_permissions.owners_of(read.id)) == sorted([role.id, other.id])


class TestPolymorphicOwner:
    def test_subject_keys_are_separated_by_type(self, db_session, role):
        """같은 subject_id라도 subject_type이 다르면 다른 주체입니다."""
        subject_roles = SqlalchemySubjectRoleRepository(db_session)

        subject_roles.link(("user", 1), [role.id])

        assert subject_roles.exists(("user", 1), role.id) is True
        assert subject_roles.exists(("service_account", 1), role.id) is False
        assert subject_roles.owners_of(role.id) == [("user", 1)]

    def test_owner_key_shape_is_validated(self, db_session, role):
        subject_roles = SqlalchemySubjectRoleRepository(db_session)

        with pytest.raises(ValueError):
            subject_roles.all_for(1)
