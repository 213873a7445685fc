"""
GraphQL mutations for predictions
"""
import logging

import strawberry
from strawberry.types import Info

from predictions.client import get_prediction_client
from predictions.models import Prediction
from predictions.utils import build_prediction_payload
from students.models import Student
from .types import PredictionType
from core.graphql.auth import require_auth, ensure_owner
from core.utils import get_object_or_not_found

logger = logging.getLogger(__name__)


@strawberry.type
class PredictionMutation:
    """Prediction-related mutations"""

    @strawberry.mutation
    @require_auth
    def create_prediction(self, info: Info, student_id: strawberry.ID) -> PredictionType:
        """
        Ask the prediction service for a forecast and store it

        Sends the student's grades to the service and persists the returned
        predicted grade and feedback. Fails without storing anything if the
        service is unreachable or answers with an unexpected shape.
        """
        student = get_object_or_not_found(
            Student.objects.prefetch_related('grades', 'assignments'),
            student_id,
        )
        ensure_owner(info, student)

        result = get_prediction_client().predict(build_prediction_payload(student))

        prediction = Prediction.objects.create(
            student=student,
            predicted_grade=result.predicted_grade,
            feedback=result.feedback,
        )
        logger.info(
            "Stored prediction %s for student %s: %s",
            prediction.id, student.id, prediction.predicted_grade
        )
        return prediction
