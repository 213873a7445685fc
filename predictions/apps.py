import atexit

from django.apps import AppConfig


class PredictionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'predictions'

    def ready(self):
        from predictions.client import close_prediction_client, get_prediction_client

        # Build the process-wide client up front and release it on shutdown
        get_prediction_client()
        atexit.register(close_prediction_client)
