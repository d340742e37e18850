"""
Domain errors raised by the service layer.

These are not HTTP exceptions. The status code each one maps to is carried
on the class and applied by the handlers registered in ``stichting.main``.
"""


class AppError(Exception):
    """Base class for all business errors in the application."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidInput(AppError):
    status_code = 400
    default_message = "Invalid input"


class Conflict(AppError):
    """Unique constraint or duplicate-record violation."""
    status_code = 400
    default_message = "Conflict"


class AlreadyEnrolled(Conflict):
    default_message = "Already enrolled?"


class CancelNotAllowed(AppError):
    status_code = 400
    default_message = "Cancel not allowed (once only). Contact admin."


class RegistrationClosed(AppError):
    status_code = 400
    default_message = "Registration is closed"


class Unauthorized(AppError):
    status_code = 401
    default_message = "Not authenticated"


class InvalidCredentials(Unauthorized):
    default_message = "Invalid credentials"


class Forbidden(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"
