"""
Domain errors raised by GraphQL resolvers.

Strawberry reports the message in the response ``errors`` list; the GraphQL
view uses ``status_code`` to pick the HTTP status of the response.
"""


class GradeTrackerError(Exception):
    default_message = "Request failed"
    status_code = 400

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class DuplicateEmail(GradeTrackerError):
    default_message = "Email already in use"
    status_code = 400


class InvalidCredentials(GradeTrackerError):
    default_message = "Invalid credentials"
    status_code = 401


class Unauthenticated(GradeTrackerError):
    default_message = "Not authenticated"
    status_code = 401


class InvalidToken(Unauthenticated):
    default_message = "Invalid token"


class Forbidden(GradeTrackerError):
    default_message = "Not authorized"
    status_code = 403


class NotFound(GradeTrackerError):
    default_message = "Not found"
    status_code = 404


class InvalidDate(GradeTrackerError):
    default_message = "Invalid date"
    status_code = 400


class UpstreamError(GradeTrackerError):
    default_message = "Prediction service unavailable"
    status_code = 502
