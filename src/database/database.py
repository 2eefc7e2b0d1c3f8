from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from src import config


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """
    SQLite는 기본적으로 외래 키 제약을 검사하지 않으므로, 새 연결마다 PRAGMA를 켭니다.
    연관 테이블의 ON DELETE CASCADE와 존재하지 않는 역할/권한 참조 검사가 이 설정에 의존합니다.
    SQLite가 아닌 엔진은 그대로 반환합니다.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def make_engine(url: str) -> Engine:
    """연결 문자열로 엔진을 만듭니다. connect_args는 SQLite에서만 필요합니다. (thread-safe 설정)"""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args, echo=config.SQL_ECHO)
    return enable_sqlite_foreign_keys(engine)


# SQLAlchemy 엔진 생성 (연결 문자열은 src/config.py에서 관리)
engine = make_engine(config.DATABASE_URL)

# 데이터베이스 세션 생성을 위한 SessionLocal 클래스
# autoflush=False로 설정하여, 명시적으로 commit을 호출해야 DB에 반영됩니다.
SessionLocal = sessionmaker(autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
