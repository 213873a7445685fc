import logging

import strawberry
from typing import Optional
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .types import AuthPayload
from core.exceptions import DuplicateEmail, InvalidCredentials
from core.security import hash_password, issue_token, verify_password

logger = logging.getLogger(__name__)

User = get_user_model()


# ==================================================
# MUTATIONS
# ==================================================

@strawberry.type
class Mutation:

    @strawberry.mutation
    def register(self, email: str, password: str, name: Optional[str] = None) -> AuthPayload:
        """
        Create an account and return an access token for it
        """
        email = User.objects.normalize_email(email.strip())

        if User.objects.filter(email__iexact=email).exists():
            raise DuplicateEmail()

        try:
            with transaction.atomic():
                user = User.objects.create(
                    email=email,
                    name=name,
                    password=hash_password(password),
                )
        except IntegrityError:
            # Concurrent registration with the same email
            raise DuplicateEmail()

        logger.info("Registered user %s (id=%s)", user.email, user.id)

        return AuthPayload(token=issue_token(user), user=user)

    @strawberry.mutation
    def login(self, email: str, password: str) -> AuthPayload:
        """
        Exchange email and password for an access token
        """
        try:
            user = User.objects.get_by_email(email.strip())
        except User.DoesNotExist:
            logger.info("Login failed for unknown email %s", email)
            raise InvalidCredentials()

        if not user.is_active or not verify_password(password, user.password):
            logger.info("Login failed for %s", user.email)
            raise InvalidCredentials()

        logger.info("User %s logged in", user.email)

        return AuthPayload(token=issue_token(user), user=user)
