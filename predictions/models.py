"""
Grade forecasts returned by the prediction service
"""
from django.db import models


class Prediction(models.Model):
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.CASCADE,
        related_name='predictions',
        help_text="Student the forecast is about"
    )
    predicted_grade = models.FloatField()
    feedback = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.student.name}: {self.predicted_grade}"
