"""Domain errors raised by the service layer.

Callers distinguish them by type; ``message`` is for humans.
"""


class ServiceError(Exception):
    """Base class for errors translated into HTTP responses by ``backend.main``."""

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(ServiceError):
    status_code = 401


class InvalidCredentials(AuthError):
    status_code = 401
    default_message = "Your email and password do not match. Please try again!"


class AlreadyRegistered(AuthError):
    status_code = 403
    default_message = "Email or username is already registered!"


class TwoFactorFailed(AuthError):
    status_code = 403
    default_message = "Two factor authentication failed!"


class UserNotFound(AuthError):
    status_code = 404
    default_message = "User not found"


class SMSValidationFailed(ServiceError):
    status_code = 400
    default_message = "Verification code is invalid or already used"


class BandwagonError(ServiceError):
    status_code = 502
    default_message = "BandwagonHost API request failed"
