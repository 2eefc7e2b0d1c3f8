import hashlib
import logging
import sys
from src import config
from src.bootstrap import create_authorization_service
from src.repositories.sqlalchemy.sqlalchemy_user_repository import SqlalchemyUserRepository
from .database import engine, SessionLocal, Base
from .models import *

DEFAULT_ROLES = [
    ('admin', '모든 관리 기능을 사용할 수 있는 역할'),
    ('member', '기본 조회 권한만 가진 역할'),
]

DEFAULT_PERMISSIONS = [
    ('manage-users', '사용자 생성/삭제'),
    ('manage-roles', '역할과 권한 부여/회수'),
    ('view-dashboard', '대시보드 조회'),
]

def initialize_db():
    """
    DB와 테이블을 생성하고, 기본 역할/권한과 관리자 계정을 삽입합니다.
    이미 역할이 하나라도 있으면 기본 데이터 삽입을 건너뜁니다.
    """
    print("DB 초기화 중 (SQLAlchemy 사용)...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)
    print("테이블 생성 완료.")

    db = SessionLocal()
    try:
        # 기본 데이터가 이미 있는지 확인
        if db.query(Role).first():
            print("기본 데이터가 이미 존재합니다. 초기화를 건너뜁니다.")
            return

        print("기본 데이터 삽입 중...")
        authz = create_authorization_service(db)

        for name, description in DEFAULT_ROLES:
            authz.create_role(name, description)
        for name, description in DEFAULT_PERMISSIONS:
            authz.create_permission(name, description)

        # admin은 모든 권한, member는 조회 권한만 가집니다.
        authz.role('admin').give_permission_to(*[name for name, _ in DEFAULT_PERMISSIONS])
        authz.role('member').give_permission_to('view-dashboard')

        # User (역할 부여 전에 id가 필요하므로 먼저 저장합니다. 이미 있으면 그대로 사용)
        user_repo = SqlalchemyUserRepository(db)
        admin_user = user_repo.find_by_username('admin')
        if admin_user is None:
            password = 'admin'
            password_hash = hashlib.sha256(password.encode('utf-8')).hexdigest()
            admin_user = user_repo.create(User(username='admin', password_hash=password_hash))
        authz.subject(admin_user).assign_role('admin')

        print("DB 초기화 및 기본 데이터 삽입 완료.")

    except Exception as e:
        print(f"오류 발생: {e}", file=sys.stderr)
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL.upper())
    initialize_db()
