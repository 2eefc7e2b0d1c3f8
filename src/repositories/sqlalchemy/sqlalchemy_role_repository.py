from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IRoleRepository

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, role_model: models.Role) -> models.Role:
        self.db.add(role_model)
        self.db.commit()
        self.db.refresh(role_model)
        return role_model

    def find_by_name(self, name: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.name == name).first()

    def find_by_ids(self, role_ids: Iterable[int]) -> List[models.Role]:
        role_ids = list(role_ids)
        if not role_ids:
            return []
        return self.db.query(models.Role).filter(models.Role.id.in_(role_ids)).order_by(models.Role.id.asc()).all()

    def list_all(self) -> List[models.Role]:
        return self.db.query(models.Role).order_by(models.Role.name.asc()).all()

    def delete(self, role: models.Role) -> bool:
        if role:
            self.db.delete(role)
            self.db.commit()
            return True
        return False
