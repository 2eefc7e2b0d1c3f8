# src/bootstrap.py
from sqlalchemy.orm import Session

from src.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from src.repositories.sqlalchemy.sqlalchemy_permission_repository import SqlalchemyPermissionRepository
from src.repositories.sqlalchemy.sqlalchemy_subject_repository import SqlalchemySubjectRepository
from src.repositories.sqlalchemy.sqlalchemy_assignment_repository import (
    SqlalchemyRolePermissionRepository,
    SqlalchemySubjectRoleRepository,
    SqlalchemySubjectPermissionRepository,
)
from src.services.authorization_service import AuthorizationService


def create_authorization_service(db_session: Session) -> AuthorizationService:
    """
    하나의 DB 세션을 공유하는 리포지토리들을 만들고 AuthorizationService에 주입합니다.
    세션의 수명(생성/close)은 호출하는 쪽이 관리합니다.

    사용 예:
        db = SessionLocal()
        try:
            authz = create_authorization_service(db)
            authz.subject(user).has_permission_to("publish-article")
        finally:
            db.close()
    """
    return AuthorizationService(
        role_repo=SqlalchemyRoleRepository(db_session),
        permission_repo=SqlalchemyPermissionRepository(db_session),
        role_permission_repo=SqlalchemyRolePermissionRepository(db_session),
        subject_role_repo=SqlalchemySubjectRoleRepository(db_session),
        subject_permission_repo=SqlalchemySubjectPermissionRepository(db_session),
        subject_repo=SqlalchemySubjectRepository(db_session),
    )
