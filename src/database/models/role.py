from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from src import config
from ..database import Base

class Role(Base):
    """
    권한(Permission)의 묶음으로, 사용자 등 주체(Subject)에게 부여됩니다.
    (예: 'admin', 'editor').
    RBAC(역할 기반 접근 제어)의 핵심 요소입니다.
    """
    __tablename__ = "roles"
    # 삭제된 행의 id를 새 행에 다시 배정하지 않습니다.
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    description = Column(String, nullable=True)
    guard_name = Column(String, nullable=False, default=config.DEFAULT_GUARD_NAME)
    created_at = Column(DateTime, server_default=func.now())

    # 역할이 삭제되면 연관 행도 함께 삭제됩니다.
    permission_links = relationship("RoleHasPermission", back_populates="role", cascade="all, delete-orphan")
    subject_links = relationship("ModelHasRole", back_populates="role", cascade="all, delete-orphan")
