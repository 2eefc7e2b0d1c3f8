from .role import IRoleRepository
from .permission import IPermissionRepository
from .user import IUserRepository
from .subject import ISubjectRepository
from .assignment import IAssignmentRepository

__all__ = [
    "IRoleRepository",
    "IPermissionRepository",
    "IUserRepository",
    "ISubjectRepository",
    "IAssignmentRepository",
]
