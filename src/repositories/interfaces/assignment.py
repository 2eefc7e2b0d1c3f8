from abc import ABC, abstractmethod
from typing import Any, Iterable, List

class IAssignmentRepository(ABC):
    """
    (owner, target) 쌍을 저장하는 연관 테이블의 공통 인터페이스입니다.
    owner는 역할이면 role_id(int), 주체이면 (subject_type, subject_id) 튜플입니다.
    """

    @abstractmethod
    def link(self, owner: Any, target_ids: Iterable[int]) -> None:
        """없는 쌍만 추가합니다. 이미 존재하는 쌍은 건드리지 않으며, 빈 목록이면 아무것도 하지 않습니다."""
        pass

    @abstractmethod
    def unlink(self, owner: Any, target_ids: Iterable[int]) -> None:
        """일치하는 쌍을 삭제합니다. 존재하지 않는 쌍은 무시합니다."""
        pass

    @abstractmethod
    def link_owners(self, owners: Iterable[Any], target_id: int) -> None:
        """여러 owner를 하나의 target에 한 번에 연결합니다. 모두 추가되거나 아무것도 추가되지 않습니다."""
        pass

    @abstractmethod
    def unlink_owners(self, owners: Iterable[Any], target_id: int) -> None:
        """여러 owner와 하나의 target 사이의 쌍을 한 번에 삭제합니다."""
        pass

    @abstractmethod
    def exists(self, owner: Any, target_id: int) -> bool:
        """(owner, target) 쌍이 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def all_for(self, owner: Any) -> List[int]:
        """owner에 연결된 모든 target ID를 조회합니다."""
        pass

    @abstractmethod
    def owners_of(self, target_id: int) -> List[Any]:
        """target에 연결된 모든 owner 키를 조회합니다."""
        pass
