from typing import Any, Dict, Iterable, List, Tuple
from sqlalchemy import and_, delete, insert, or_
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IAssignmentRepository

class SqlalchemyAssignmentRepository(IAssignmentRepository):
    """
    연관 테이블 하나를 (owner 컬럼들, target 컬럼)으로 다루는 공통 구현입니다.
    하위 클래스는 model, owner_columns, target_column만 지정합니다.

    중복 방지는 테이블의 복합 기본 키가 담당합니다. SQLite와 PostgreSQL에서는
    INSERT ... ON CONFLICT DO NOTHING을 사용하므로, 같은 쌍을 동시에 추가하는
    요청이 경쟁하더라도 중복 행이나 오류가 생기지 않습니다. MySQL/MariaDB에서는
    ON DUPLICATE KEY UPDATE로 같은 효과를 냅니다.
    """
    model = None
    owner_columns: Tuple[str, ...] = ()
    target_column: str = ""

    def __init__(self, db_session: Session):
        self.db = db_session

    @property
    def _table(self):
        return self.model.__table__

    def _owner_values(self, owner: Any) -> Dict[str, Any]:
        values = owner if isinstance(owner, tuple) else (owner,)
        if len(values) != len(self.owner_columns):
            raise ValueError(f"Owner key {owner!r} does not match columns {self.owner_columns}.")
        return dict(zip(self.owner_columns, values))

    def _owner_filter(self, owner: Any) -> list:
        return [self._table.c[column] == value for column, value in self._owner_values(owner).items()]

    def _insert_statement(self, rows: List[Dict[str, Any]]):
        dialect = self.db.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite.insert(self._table).values(rows).on_conflict_do_nothing()
        if dialect == "postgresql":
            return postgresql.insert(self._table).values(rows).on_conflict_do_nothing()
        if dialect in ("mysql", "mariadb"):
            # 중복 키만 무시하고, 외래 키 오류는 그대로 발생시킵니다.
            statement = mysql.insert(self._table).values(rows)
            return statement.on_duplicate_key_update({self.target_column: statement.inserted[self.target_column]})
        return insert(self._table).values(rows)

    def _insert(self, rows: List[Dict[str, Any]]) -> None:
        if not rows:
            return
        try:
            self.db.execute(self._insert_statement(rows))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

    def link(self, owner: Any, target_ids: Iterable[int]) -> None:
        owner_values = self._owner_values(owner)
        missing = set(target_ids) - set(self.all_for(owner))
        self._insert([{**owner_values, self.target_column: target_id} for target_id in sorted(missing)])

    def link_owners(self, owners: Iterable[Any], target_id: int) -> None:
        held = set(self.owners_of(target_id))
        missing = [owner for owner in dict.fromkeys(owners) if owner not in held]
        self._insert([{**self._owner_values(owner), self.target_column: target_id} for owner in missing])

    def unlink(self, owner: Any, target_ids: Iterable[int]) -> None:
        target_ids = set(target_ids)
        if not target_ids:
            return
        self.db.execute(
            delete(self._table).where(
                *self._owner_filter(owner),
                self._table.c[self.target_column].in_(target_ids)
            )
        )
        self.db.commit()

    def unlink_owners(self, owners: Iterable[Any], target_id: int) -> None:
        owners = list(dict.fromkeys(owners))
        if not owners:
            return
        self.db.execute(
            delete(self._table).where(
                or_(*[and_(*self._owner_filter(owner)) for owner in owners]),
                self._table.c[self.target_column] == target_id
            )
        )
        self.db.commit()

    def exists(self, owner: Any, target_id: int) -> bool:
        row = self.db.query(self._table.c[self.target_column]).filter(
            *self._owner_filter(owner),
            self._table.c[self.target_column] == target_id
        ).first()
        return row is not None

    def all_for(self, owner: Any) -> List[int]:
        rows = self.db.query(self._table.c[self.target_column]).filter(*self._owner_filter(owner)).all()
        return [row[0] for row in rows]

    def owners_of(self, target_id: int) -> List[Any]:
        columns = [self._table.c[column] for column in self.owner_columns]
        rows = self.db.query(*columns).filter(self._table.c[self.target_column] == target_id).all()
        if len(columns) == 1:
            return [row[0] for row in rows]
        return [tuple(row) for row in rows]


class SqlalchemyRolePermissionRepository(SqlalchemyAssignmentRepository):
    """role_has_permissions: owner = role_id, target = permission_id"""
    model = models.RoleHasPermission
    owner_columns = ("role_id",)
    target_column = "permission_id"


class SqlalchemySubjectRoleRepository(SqlalchemyAssignmentRepository):
    """model_has_roles: owner = (subject_type, subject_id), target = role_id"""
    model = models.ModelHasRole
    owner_columns = ("subject_type", "subject_id")
    target_column = "role_id"


class SqlalchemySubjectPermissionRepository(SqlalchemyAssignmentRepository):
    """model_has_permissions: owner = (subject_type, subject_id), target = permission_id"""
    model = models.ModelHasPermission
    owner_columns = ("subject_type", "subject_id")
    target_column = "permission_id"
