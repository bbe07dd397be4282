class ContentAPIError(Exception):
    """Base class for errors that map onto an API response."""

    status_code = 500
    default_message = "An internal server error occurred."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(ContentAPIError):
    status_code = 400
    default_message = "Invalid payload."


class InvariantViolation(ValidationError):
    """Raised when a document breaks a domain invariant."""


class AuthError(ContentAPIError):
    status_code = 401
    default_message = "Authentication required."


class ForbiddenError(ContentAPIError):
    status_code = 403
    default_message = "Forbidden."


class NotFoundError(ContentAPIError):
    status_code = 404
    default_message = "Not found."


class ConflictError(ContentAPIError):
    status_code = 409
    default_message = "Conflict."


class StoreError(ContentAPIError):
    """Any failure talking to the key-value store."""

    status_code = 500
    default_message = "Key-value store request failed."
