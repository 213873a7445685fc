"""
Client for the external grade prediction service

The service is reached through a single process-wide client built from
settings.PREDICTION_SERVICE when the predictions app loads. Tests swap it
for an in-memory double with set_prediction_client().
"""
import logging
import math
from dataclasses import dataclass

import httpx
from django.conf import settings
from django.utils.module_loading import import_string

from core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredictionResult:
    predicted_grade: float
    feedback: str


class BasePredictionClient:
    """
    Interface for prediction backends

    Subclasses implement predict(); close() releases held resources.
    """

    def predict(self, payload: dict) -> PredictionResult:
        raise NotImplementedError('subclasses of BasePredictionClient must provide a predict() method')

    def close(self):
        pass


class HttpPredictionClient(BasePredictionClient):
    """
    POSTs the payload as JSON and expects {"predictedGrade": number, "feedback": string}
    """

    def __init__(self, url, timeout=None, transport=None):
        self.url = url
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def predict(self, payload: dict) -> PredictionResult:
        logger.info("Requesting prediction from %s (%d grades)", self.url, len(payload.get('grades', [])))

        try:
            response = self._client.post(self.url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Prediction service returned HTTP %s", e.response.status_code)
            raise UpstreamError(f"Prediction service returned HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning("Prediction service request failed: %s", e)
            raise UpstreamError(f"Prediction service unreachable: {e}")
        except ValueError:
            logger.warning("Prediction service returned a non-JSON body")
            raise UpstreamError("Prediction service returned invalid JSON")

        return parse_prediction_response(data)

    def close(self):
        self._client.close()


def parse_prediction_response(data) -> PredictionResult:
    """
    Validate the upstream response shape

    Raises:
        UpstreamError: missing keys, non-numeric grade or non-string feedback
    """
    if not isinstance(data, dict):
        raise UpstreamError("Malformed prediction response")

    predicted_grade = data.get('predictedGrade')
    feedback = data.get('feedback')

    # bool is an int subclass
    if (
        isinstance(predicted_grade, bool)
        or not isinstance(predicted_grade, (int, float))
        or not math.isfinite(predicted_grade)
    ):
        raise UpstreamError("Malformed prediction response: predictedGrade must be a number")

    if not isinstance(feedback, str):
        raise UpstreamError("Malformed prediction response: feedback must be a string")

    return PredictionResult(predicted_grade=float(predicted_grade), feedback=feedback)


# ==================================================
# PROCESS-WIDE CLIENT
# ==================================================

_client = None


def build_prediction_client(config=None) -> BasePredictionClient:
    config = config or settings.PREDICTION_SERVICE
    client_class = import_string(config['CLIENT'])
    return client_class(url=config['URL'], timeout=config.get('TIMEOUT'))


def get_prediction_client() -> BasePredictionClient:
    global _client
    if _client is None:
        _client = build_prediction_client()
    return _client


def set_prediction_client(client: BasePredictionClient):
    """Replace the process-wide client, closing the previous one"""
    global _client
    previous, _client = _client, client
    if previous is not None and previous is not client:
        previous.close()


def close_prediction_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None
