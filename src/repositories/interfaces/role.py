from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.database import models

class IRoleRepository(ABC):
    @abstractmethod
    def create(self, role_model: models.Role) -> models.Role:
        """새로운 역할을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.Role]:
        """이름으로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def find_by_ids(self, role_ids: Iterable[int]) -> List[models.Role]:
        """여러 ID에 해당하는 역할들을 ID 순으로 조회합니다. 없는 ID는 무시합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Role]:
        """모든 역할의 목록을 이름 순으로 조회합니다."""
        pass

    @abstractmethod
    def delete(self, role: models.Role) -> bool:
        """특정 역할을 삭제합니다. 역할에 연결된 모든 연관 행도 함께 삭제됩니다."""
        pass
