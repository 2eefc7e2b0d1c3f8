from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from ..database import Base

class RoleHasPermission(Base):
    """
    역할(Role)과 권한(Permission) 사이의 다대다(many-to-many) 관계를 연결하는 연관 테이블입니다.
    복합 기본 키가 (role_id, permission_id) 쌍의 중복을 DB 수준에서 막습니다.
    """
    __tablename__ = 'role_has_permissions'
    role_id = Column(Integer, ForeignKey('roles.id', ondelete='CASCADE'), primary_key=True)
    permission_id = Column(Integer, ForeignKey('permissions.id', ondelete='CASCADE'), primary_key=True)

    role = relationship("Role", back_populates="permission_links")
    permission = relationship("Permission", back_populates="role_links")


class ModelHasRole(Base):
    """
    임의의 주체(Subject)와 역할 사이의 다형성(polymorphic) 연관 테이블입니다.
    주체는 (subject_type, subject_id) 쌍으로 가리키므로 주체 쪽에는 외래 키가 없습니다.
    """
    __tablename__ = 'model_has_roles'
    role_id = Column(Integer, ForeignKey('roles.id', ondelete='CASCADE'), primary_key=True)
    subject_type = Column(String, primary_key=True)
    subject_id = Column(Integer, primary_key=True)

    __table_args__ = (
        Index('ix_model_has_roles_subject', 'subject_type', 'subject_id'),
    )

    role = relationship("Role", back_populates="subject_links")


class ModelHasPermission(Base):
    """주체에게 직접 부여된 권한을 저장하는 다형성 연관 테이블입니다."""
    __tablename__ = 'model_has_permissions'
    permission_id = Column(Integer, ForeignKey('permissions.id', ondelete='CASCADE'), primary_key=True)
    subject_type = Column(String, primary_key=True)
    subject_id = Column(Integer, primary_key=True)

    __table_args__ = (
        Index('ix_model_has_permissions_subject', 'subject_type', 'subject_id'),
    )

    permission = relationship("Permission", back_populates="subject_links")
