from typing import Dict, Optional, Tuple, Type

# subject_type 태그 -> 모델 클래스. 역할/권한을 가진 주체를 역으로 조회할 때 사용합니다.
_subject_registry: Dict[str, Type["HasRolesAndPermissions"]] = {}


class HasRolesAndPermissions:
    """
    역할과 직접 권한을 가질 수 있는 모델(주체, Subject)에 붙이는 믹스인입니다.

    다형성 연관 테이블(model_has_roles, model_has_permissions)의 행은
    (subject_type, subject_id) 쌍으로 주체를 가리킵니다. 호스트 모델은 정수형 `id`
    컬럼을 가져야 하며, `__subject_type__`으로 안정적인 타입 태그를 지정할 수 있습니다.
    지정하지 않으면 클래스 이름을 소문자로 바꾼 값을 사용합니다.

    사용 예:
        class User(HasRolesAndPermissions, Base):
            __tablename__ = "users"
            __subject_type__ = "user"
            id = Column(Integer, primary_key=True)

    실제 역할/권한 조작은 AuthorizationService.subject(user)가 반환하는
    SubjectAccess가 담당합니다.
    """
    __subject_type__: Optional[str] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        subject_type = cls.__dict__.get("__subject_type__") or cls.__name__.lower()
        registered = _subject_registry.get(subject_type)
        if registered is not None and registered.__qualname__ != cls.__qualname__:
            raise ValueError(
                f"Subject type '{subject_type}' is already used by {registered.__name__}."
            )
        cls.__subject_type__ = subject_type
        _subject_registry[subject_type] = cls

    @property
    def subject_key(self) -> Tuple[str, int]:
        """연관 테이블에 저장되는 (subject_type, subject_id) 쌍"""
        return (self.__subject_type__, self.id)


def subject_class_for(subject_type: str) -> Optional[Type[HasRolesAndPermissions]]:
    """등록된 주체 타입 태그에 해당하는 모델 클래스를 반환합니다. 없으면 None."""
    return _subject_registry.get(subject_type)
