"""
Utility functions for predictions
"""

# Fixed metrics sent until assignment counts and attendance are tracked
PLACEHOLDER_ASSIGNMENTS = 5
PLACEHOLDER_ATTENDANCE = 92


def build_prediction_payload(student) -> dict:
    """
    Build the JSON body sent to the prediction service

    Args:
        student: Student instance (grades ideally prefetched)

    Returns:
        dict: {"grades": [...], "assignments": int, "attendance": int}
    """
    grades = [
        {
            'id': str(grade.id),
            'value': grade.value,
            'date': grade.date.isoformat(),
            'studentId': str(student.id),
        }
        for grade in student.grades.all()
    ]

    return {
        'grades': grades,
        'assignments': PLACEHOLDER_ASSIGNMENTS,
        'attendance': PLACEHOLDER_ATTENDANCE,
    }
