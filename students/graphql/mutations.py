"""
GraphQL mutations for students
"""
import logging

import strawberry
from strawberry.types import Info

from students.models import Student
from .types import StudentType
from core.graphql.auth import require_auth, get_current_user, ensure_owner
from core.utils import get_object_or_not_found

logger = logging.getLogger(__name__)


@strawberry.type
class StudentMutation:
    """Student-related mutations"""

    @strawberry.mutation
    @require_auth
    def create_student(self, info: Info, name: str) -> StudentType:
        """
        Create a student owned by the current user
        """
        user = get_current_user(info)
        student = Student.objects.create(name=name, user=user)
        logger.info("User %s created student %s", user.id, student.id)
        return student

    @strawberry.mutation
    @require_auth
    def update_student(self, info: Info, id: strawberry.ID, name: str) -> StudentType:
        """
        Rename a student (owner only)
        """
        student = get_object_or_not_found(Student, id)
        ensure_owner(info, student)

        student.name = name
        student.save(update_fields=['name'])
        return student

    @strawberry.mutation
    @require_auth
    def delete_student(self, info: Info, id: strawberry.ID) -> bool:
        """
        Delete a student together with its assignments, grades and predictions
        """
        student = get_object_or_not_found(Student, id)
        user = ensure_owner(info, student)

        student.delete()
        logger.info("User %s deleted student %s", user.id, id)
        return True
