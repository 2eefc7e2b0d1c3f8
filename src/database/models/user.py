from sqlalchemy import Column, Integer, String
from ..database import Base
from .subject import HasRolesAndPermissions

class User(HasRolesAndPermissions, Base):
    """
    시스템에 로그인하는 사용자로, 가장 일반적인 주체(Subject)입니다.
    역할을 통해, 또는 직접 부여받은 권한으로 작업을 수행할 수 있습니다.
    """
    __tablename__ = "users"
    __subject_type__ = "user"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
