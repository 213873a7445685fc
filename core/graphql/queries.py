import strawberry
from typing import List, Optional
from strawberry.types import Info

from core.models import User

from .types import UserType
from .auth import get_current_user, require_auth


@strawberry.type
class Query:

    # ==================================================
    # USER
    # ==================================================
    @strawberry.field
    def users(self, info: Info) -> List[UserType]:
        return User.objects.order_by("id")

    @strawberry.field
    @require_auth
    def me(self, info: Info) -> Optional[UserType]:
        """
        Get current authenticated user info
        Requires valid JWT token in Authorization header
        """
        return get_current_user(info)
