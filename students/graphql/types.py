"""
GraphQL types for students
"""
import strawberry
import strawberry_django
from typing import List

from students.models import Student
from core.graphql.types import UserType
from assignment.graphql.types import AssignmentType
from grades.graphql.types import GradeType
from predictions.graphql.types import PredictionType


@strawberry_django.type(Student, name="Student")
class StudentType:
    id: strawberry.ID
    name: str
    user: UserType

    @strawberry_django.field
    def assignments(self) -> List[AssignmentType]:
        return self.assignments.all()

    @strawberry_django.field
    def grades(self) -> List[GradeType]:
        return self.grades.all()

    @strawberry_django.field
    def predictions(self) -> List[PredictionType]:
        return self.predictions.all()
