"""
GraphQL types for assignments
"""
import strawberry
import strawberry_django

from assignment.models import Assignment


@strawberry_django.type(Assignment, name="Assignment")
class AssignmentType:
    id: strawberry.ID
    file_url: str

    @strawberry_django.field
    def submitted_at(self) -> str:
        return self.submitted_at.isoformat()
