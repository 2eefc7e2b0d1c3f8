from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple
from src.database import models

class ISubjectRepository(ABC):
    @abstractmethod
    def find_by_keys(self, keys: Iterable[Tuple[str, int]]) -> List[models.HasRolesAndPermissions]:
        """
        (subject_type, subject_id) 쌍의 목록으로 주체 모델 인스턴스들을 조회합니다.

        Args:
            keys: 연관 테이블에서 읽은 주체 키의 목록.

        Returns:
            타입별로 묶어 ID 순으로 정렬한 주체 인스턴스의 리스트.
            등록되지 않은 타입이나 이미 삭제된 주체는 결과에서 빠집니다.
        """
        pass
