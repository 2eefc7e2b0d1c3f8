from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.database import models

class IPermissionRepository(ABC):
    @abstractmethod
    def create(self, permission_model: models.Permission) -> models.Permission:
        """새로운 권한을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.Permission]:
        """이름으로 특정 권한을 조회합니다."""
        pass

    @abstractmethod
    def find_by_ids(self, permission_ids: Iterable[int]) -> List[models.Permission]:
        """여러 ID에 해당하는 권한들을 ID 순으로 조회합니다. 없는 ID는 무시합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Permission]:
        """모든 권한의 목록을 이름 순으로 조회합니다."""
        pass

    @abstractmethod
    def delete(self, permission: models.Permission) -> bool:
        """특정 권한을 삭제합니다. 권한에 연결된 모든 연관 행도 함께 삭제됩니다."""
        pass
