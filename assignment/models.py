"""
Assignment submissions for a student
"""
from django.db import models
from django.utils import timezone


class Assignment(models.Model):
    """
    A submitted piece of work, stored externally and referenced by URL
    """
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.CASCADE,
        related_name='assignments',
        help_text="Student who submitted this assignment"
    )
    file_url = models.URLField(max_length=500, help_text="Location of the submitted file")
    submitted_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-submitted_at', '-id']

    def __str__(self):
        return f"{self.student.name} - {self.file_url}"
