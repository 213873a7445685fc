import strawberry
import strawberry_django

from predictions.models import Prediction


@strawberry_django.type(Prediction, name="Prediction")
class PredictionType:
    id: strawberry.ID
    predicted_grade: float
    feedback: str

    @strawberry_django.field
    def created_at(self) -> str:
        return self.created_at.isoformat()
