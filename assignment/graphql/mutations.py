"""
GraphQL mutations for assignments
"""
import logging

import strawberry
from strawberry.types import Info

from assignment.models import Assignment
from students.models import Student
from assignment.graphql.types import AssignmentType
from core.graphql.auth import require_auth, ensure_owner
from core.utils import get_object_or_not_found

logger = logging.getLogger(__name__)


@strawberry.type
class AssignmentMutation:
    """Assignment-related mutations"""

    @strawberry.mutation
    @require_auth
    def create_assignment(self, info: Info, student_id: strawberry.ID, file_url: str) -> AssignmentType:
        """
        Record a submitted assignment for one of the caller's students
        """
        student = get_object_or_not_found(Student, student_id)
        ensure_owner(info, student)

        assignment = Assignment.objects.create(student=student, file_url=file_url)
        logger.info("Created assignment %s for student %s", assignment.id, student.id)
        return assignment

    @strawberry.mutation
    @require_auth
    def delete_assignment(self, info: Info, id: strawberry.ID) -> bool:
        assignment = get_object_or_not_found(Assignment.objects.select_related('student'), id)
        ensure_owner(info, assignment.student)

        assignment.delete()
        logger.info("Deleted assignment %s", id)
        return True
