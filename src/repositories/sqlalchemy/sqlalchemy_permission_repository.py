from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IPermissionRepository

class SqlalchemyPermissionRepository(IPermissionRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, permission_model: models.Permission) -> models.Permission:
        self.db.add(permission_model)
        self.db.commit()
        self.db.refresh(permission_model)
        return permission_model

    def find_by_name(self, name: str) -> Optional[models.Permission]:
        return self.db.query(models.Permission).filter(models.Permission.name == name).first()

    def find_by_ids(self, permission_ids: Iterable[int]) -> List[models.Permission]:
        permission_ids = list(permission_ids)
        if not permission_ids:
            return []
        return (
            self.db.query(models.Permission)
            .filter(models.Permission.id.in_(permission_ids))
            .order_by(models.Permission.id.asc())
            .all()
        )

    def list_all(self) -> List[models.Permission]:
        return self.db.query(models.Permission).order_by(models.Permission.name.asc()).all()

    def delete(self, permission: models.Permission) -> bool:
        if permission:
            self.db.delete(permission)
            self.db.commit()
            return True
        return False
