"""
URL configuration for GTS project.

    /admin/    Django admin
    /graphql/  GraphQL API (GraphiQL in the browser)
"""
import logging

from django.contrib import admin
from django.urls import path
from django.views.decorators.csrf import csrf_exempt
from strawberry.django.views import GraphQLView

from core.exceptions import GradeTrackerError
from core.graphql.schema import schema

logger = logging.getLogger(__name__)


class CustomGraphQLView(GraphQLView):
    """Custom GraphQL view that returns proper HTTP status codes for errors"""

    def process_result(self, request, result):
        """Pick the HTTP status from the first error of the result"""
        if result.errors:
            status_code = 400
            for error in result.errors:
                logger.warning("GraphQL error on %s: %s", error.path, error.message)

            original = result.errors[0].original_error
            if isinstance(original, GradeTrackerError):
                status_code = original.status_code

            request.graphql_status_code = status_code

        return super().process_result(request, result)

    def dispatch(self, request, *args, **kwargs):
        response = super().dispatch(request, *args, **kwargs)

        status_code = getattr(request, 'graphql_status_code', None)
        if status_code and response.status_code == 200:
            response.status_code = status_code

        return response


urlpatterns = [
    path('admin/', admin.site.urls),
    path("graphql/", csrf_exempt(CustomGraphQLView.as_view(schema=schema))),
]
