"""
GraphQL queries for students
"""
import strawberry
from typing import List
from strawberry.types import Info

from students.models import Student
from .types import StudentType


@strawberry.type
class StudentQuery:
    """Student-related queries"""

    @strawberry.field
    def students(self, info: Info) -> List[StudentType]:
        return Student.objects.select_related('user')
