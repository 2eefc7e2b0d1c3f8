from typing import Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IUserRepository

class SqlalchemyUserRepository(IUserRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, user_model: models.User) -> models.User:
        self.db.add(user_model)
        self.db.commit()
        self.db.refresh(user_model)
        return user_model

    def find_by_username(self, username: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.username == username).first()

    def delete(self, user: models.User) -> bool:
        if user:
            # 다형성 연관 행은 외래 키로 묶여 있지 않으므로 직접 지웁니다.
            subject_type, subject_id = user.subject_key
            for association in (models.ModelHasRole, models.ModelHasPermission):
                self.db.query(association).filter(
                    association.subject_type == subject_type,
                    association.subject_id == subject_id
                ).delete(synchronize_session=False)
            self.db.delete(user)
            self.db.commit()
            return True
        return False
