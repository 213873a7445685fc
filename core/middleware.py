"""
JWT Authentication Middleware for Bearer Token Authentication
"""
import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.utils.deprecation import MiddlewareMixin

from core.exceptions import InvalidToken, Unauthenticated
from core.security import verify_token

logger = logging.getLogger(__name__)

User = get_user_model()

BEARER_PREFIX = 'Bearer '


class JWTAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware to authenticate requests using JWT Bearer tokens.
    Extracts token from Authorization header: "Bearer <token>"
    and attaches authenticated user to request.user

    Sets on the request:
        - jwt_payload: decoded claims, only when the token is valid
        - jwt_error: the Unauthenticated/InvalidToken error explaining why a
          presented header was rejected

    GraphQL resolvers only trust request.user when jwt_payload is present,
    so session cookies never authenticate API calls.
    """

    def process_request(self, request):
        auth_header = request.META.get('HTTP_AUTHORIZATION', '')

        if not auth_header:
            return

        if not auth_header.startswith(BEARER_PREFIX):
            self._reject(request, Unauthenticated('Authorization header must use the Bearer scheme'))
            return

        token = auth_header[len(BEARER_PREFIX):].strip()

        try:
            payload = verify_token(token)
        except InvalidToken as e:
            self._reject(request, e)
            return

        try:
            user = User.objects.get(id=payload['user_id'], is_active=True)
        except (User.DoesNotExist, ValueError, TypeError):
            self._reject(request, InvalidToken('User not found or inactive'))
            return

        request.user = user
        request.jwt_payload = payload

    @staticmethod
    def _reject(request, error):
        logger.debug("Rejected Authorization header: %s", error)
        request.user = AnonymousUser()
        request.jwt_error = error
