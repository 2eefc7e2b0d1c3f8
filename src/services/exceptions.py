# src/services/exceptions.py

# --- Not Found Exceptions ---
class NotFoundError(Exception):
    """이름이나 ID로 찾는 대상이 저장소에 없을 때"""
    pass

class RoleNotFoundError(NotFoundError):
    """역할을 찾을 수 없을 때"""
    pass

class PermissionNotFoundError(NotFoundError):
    """권한을 찾을 수 없을 때"""
    pass

# --- Creation Exceptions ---
class RoleAlreadyExistsError(Exception):
    """역할 이름이 이미 존재할 때"""
    pass

class PermissionAlreadyExistsError(Exception):
    """권한 이름이 이미 존재할 때"""
    pass

# --- Assignment Exceptions ---
class AssignmentConstraintError(Exception):
    """연관 행 추가가 외래 키 등 DB 제약을 위반할 때 (예: 삭제된 역할/권한 참조)"""
    pass
