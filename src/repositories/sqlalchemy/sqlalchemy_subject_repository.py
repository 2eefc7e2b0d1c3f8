import logging
from typing import Dict, Iterable, List, Tuple
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import ISubjectRepository

logger = logging.getLogger(__name__)

class SqlalchemySubjectRepository(ISubjectRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_keys(self, keys: Iterable[Tuple[str, int]]) -> List[models.HasRolesAndPermissions]:
        ids_by_type: Dict[str, List[int]] = {}
        for subject_type, subject_id in keys:
            ids_by_type.setdefault(subject_type, []).append(subject_id)

        subjects = []
        for subject_type, subject_ids in ids_by_type.items():
            model = models.subject_class_for(subject_type)
            if model is None:
                logger.warning(
                    "Skipping %d assignment(s) for unregistered subject type '%s'.",
                    len(subject_ids), subject_type
                )
                continue
            subjects.extend(
                self.db.query(model).filter(model.id.in_(subject_ids)).order_by(model.id.asc()).all()
            )
        return subjects
