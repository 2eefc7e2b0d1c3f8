# tests/conftest.py
import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.bootstrap import create_authorization_service
from src.database import models
from src.database.database import Base, enable_sqlite_foreign_keys


class ServiceAccount(models.HasRolesAndPermissions, Base):
    """User가 아닌 두 번째 주체 타입. 다형성 연관을 검증하는 데 사용합니다."""
    __tablename__ = "test_service_accounts"
    __subject_type__ = "service_account"
    id = Column(Integer, primary_key=True)
    label = Column(String, nullable=False)


@pytest.fixture
def db_engine():
    """테스트마다 새로 만드는 인메모리 SQLite 엔진 (외래 키 검사 활성화)"""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = sessionmaker(autoflush=False, bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def authz(db_session):
    """실제 SQLAlchemy 리포지토리가 주입된 AuthorizationService"""
    return create_authorization_service(db_session)


@pytest.fixture
def make_user(db_session):
    def _make_user(username: str) -> models.User:
        user = models.User(username=username, password_hash="hash")
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user
