"""
Grades Models for Grade Tracking System
Individual marks recorded for a student over time
"""
from django.db import models


class Grade(models.Model):
    """
    A single numeric mark received by a student on a given date
    """
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.CASCADE,
        related_name='grades',
        help_text="Student who received this grade"
    )
    value = models.FloatField(help_text="Numeric grade value")
    date = models.DateTimeField(help_text="When the grade was awarded")

    class Meta:
        ordering = ['date', 'id']

    def __str__(self):
        return f"{self.student.name}: {self.value} ({self.date:%Y-%m-%d})"
