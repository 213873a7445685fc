"""
Password hashing and JWT access tokens
"""
import logging
import uuid

import jwt
from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.utils import timezone

from core.exceptions import InvalidToken

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = 'access'


# ==================================================
# PASSWORDS
# ==================================================

def hash_password(plaintext: str) -> str:
    """Salted one-way hash using the first entry of PASSWORD_HASHERS"""
    return make_password(plaintext)


def verify_password(plaintext: str, hashed: str) -> bool:
    if not hashed:
        return False
    return check_password(plaintext, hashed)


# ==================================================
# TOKENS
# ==================================================

def issue_token(user) -> str:
    """
    Issue a signed access token for the given user

    Claims:
        user_id: primary key of the user (token subject)
        type: always 'access'
        iat / exp: issue time and expiry (JWT_ACCESS_TOKEN_LIFETIME)
        jti: random id so that two tokens issued in the same second differ
    """
    now = timezone.now()
    payload = {
        'user_id': user.pk,
        'type': ACCESS_TOKEN_TYPE,
        'iat': now,
        'exp': now + settings.JWT_ACCESS_TOKEN_LIFETIME,
        'jti': uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> dict:
    """
    Decode and validate an access token

    Returns:
        dict: the token claims

    Raises:
        InvalidToken: expired, malformed, wrongly signed, wrong type or no subject
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={'require': ['exp', 'iat']},
        )
    except jwt.ExpiredSignatureError:
        raise InvalidToken("Token has expired")
    except jwt.InvalidTokenError as e:
        raise InvalidToken(f"Invalid token: {e}")

    if payload.get('type') != ACCESS_TOKEN_TYPE:
        raise InvalidToken("Invalid token type. Expected access token.")

    if not payload.get('user_id'):
        raise InvalidToken("No user_id in token payload")

    return payload
