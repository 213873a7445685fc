"""
Students tracked by a user (parent, tutor or teacher)
"""
from django.conf import settings
from django.db import models


class Student(models.Model):
    """
    A learner owned by exactly one user.
    Deleting a student deletes its assignments, grades and predictions.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='students',
        help_text="User who owns this student"
    )
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name
