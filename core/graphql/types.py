import strawberry
import strawberry_django
from typing import TYPE_CHECKING, Annotated, List, Optional

from core.models import User

if TYPE_CHECKING:
    from students.graphql.types import StudentType


# ==================================================
# TYPE DEFINITIONS
# ==================================================

@strawberry_django.type(User, name="User")
class UserType:
    id: strawberry.ID
    email: str
    name: Optional[str]

    @strawberry_django.field
    def students(self) -> List[Annotated["StudentType", strawberry.lazy("students.graphql.types")]]:
        return self.students.all()


@strawberry.type
class AuthPayload:
    token: str
    user: UserType
