from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from src import config
from ..database import Base

class Permission(Base):
    """
    시스템에서 수행할 수 있는 특정 행위를 나타냅니다.
    (예: 'publish-article', 'manage-users').
    역할을 통해 간접적으로, 또는 주체에게 직접 부여됩니다.
    """
    __tablename__ = "permissions"
    # 삭제된 행의 id를 새 행에 다시 배정하지 않습니다.
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    description = Column(String, nullable=True)
    guard_name = Column(String, nullable=False, default=config.DEFAULT_GUARD_NAME)
    created_at = Column(DateTime, server_default=func.now())

    role_links = relationship("RoleHasPermission", back_populates="permission", cascade="all, delete-orphan")
    subject_links = relationship("ModelHasPermission", back_populates="permission", cascade="all, delete-orphan")
