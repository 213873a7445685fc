"""
Utility functions for GraphQL authentication and authorization
"""
from functools import wraps
from typing import Callable

from strawberry.types import Info

from core.exceptions import Forbidden, Unauthenticated


def is_authenticated(info: Info) -> bool:
    """
    Check if the request carries a valid Bearer token

    Args:
        info: Strawberry Info object containing request context

    Returns:
        bool: True if the JWT middleware authenticated the request
    """
    request = info.context.request
    return (
        hasattr(request, 'jwt_payload')
        and hasattr(request, 'user')
        and request.user.is_authenticated
    )


def get_current_user(info: Info):
    """
    Return the user identified by the Bearer token

    Raises:
        Unauthenticated: header missing or not a Bearer header
        InvalidToken: token rejected by the middleware
    """
    if is_authenticated(info):
        return info.context.request.user

    error = getattr(info.context.request, 'jwt_error', None)
    if error is not None:
        raise type(error)(str(error))
    raise Unauthenticated()


def ensure_owner(info: Info, student):
    """
    Require the caller to own the given student

    Returns:
        The current user
    """
    user = get_current_user(info)
    if student.user_id != user.id:
        raise Forbidden("Not authorized to access this student")
    return user


def _find_info(args, kwargs):
    for arg in args:
        if isinstance(arg, Info):
            return arg
    return kwargs.get('info')


def require_auth(func: Callable) -> Callable:
    """
    Decorator to require authentication for GraphQL resolvers
    Raises Unauthenticated (or InvalidToken) if no valid Bearer token was sent

    Usage:
        @strawberry.field
        @require_auth
        def my_query(self, info: Info) -> str:
            return "Authenticated"
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        info = _find_info(args, kwargs)

        if not info:
            raise Exception("Authentication check requires Info parameter")

        get_current_user(info)

        return func(*args, **kwargs)

    return wrapper
