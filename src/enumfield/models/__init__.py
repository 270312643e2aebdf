"""Domain models package."""

from enumfield.models.enum_schemas import EnumDefinitionRead, EnumValueRead
from enumfield.models.enums import ROLE, STATUS, USER_ROLES, USER_STATUSES
from enumfield.models.user import User
from enumfield.models.user_schemas import UserCreate, UserResponse

__all__ = [
    "EnumDefinitionRead",
    "EnumValueRead",
    "ROLE",
    "STATUS",
    "USER_ROLES",
    "USER_STATUSES",
    "User",
    "UserCreate",
    "UserResponse",
]
