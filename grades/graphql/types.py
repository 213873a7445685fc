"""
GraphQL types for grades
"""
import strawberry
import strawberry_django

from grades.models import Grade


@strawberry_django.type(Grade, name="Grade")
class GradeType:
    id: strawberry.ID
    value: float

    @strawberry_django.field
    def date(self) -> str:
        return self.date.isoformat()
