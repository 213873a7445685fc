"""
GraphQL mutations for grades
"""
import logging

import strawberry
from strawberry.types import Info

from grades.models import Grade
from grades.utils import parse_grade_date
from students.models import Student
from .types import GradeType
from core.graphql.auth import require_auth, ensure_owner
from core.utils import get_object_or_not_found

logger = logging.getLogger(__name__)


@strawberry.type
class GradesMutation:
    """Grades-related mutations"""

    @strawberry.mutation
    @require_auth
    def add_grade(self, info: Info, student_id: strawberry.ID, value: float, date: str) -> GradeType:
        """
        Record a grade for one of the caller's students
        """
        student = get_object_or_not_found(Student, student_id)
        ensure_owner(info, student)

        grade = Grade.objects.create(
            student=student,
            value=value,
            date=parse_grade_date(date),
        )
        logger.info("Added grade %s (%s) for student %s", grade.id, value, student.id)
        return grade

    @strawberry.mutation
    @require_auth
    def delete_grade(self, info: Info, id: strawberry.ID) -> bool:
        grade = get_object_or_not_found(Grade.objects.select_related('student'), id)
        ensure_owner(info, grade.student)

        grade.delete()
        logger.info("Deleted grade %s", id)
        return True
