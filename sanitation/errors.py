"""Tagged failures shared by the data access layer, domain operations and API.

Each class carries a stable ``error_code`` and the HTTP status the API answers
with, so callers can branch on the kind of failure instead of parsing messages.
"""


class PortalError(Exception):
    error_code = "portal_error"
    status_code = 500
    default_message = "Something went wrong. Please try again later."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    error_code = "validation_error"
    status_code = 422
    default_message = "Invalid input."


class SelectionRequiredError(ValidationError):
    error_code = "selection_required"
    default_message = "Please select a category and subcategory."


class AuthRequiredError(PortalError):
    error_code = "login_required"
    status_code = 401
    default_message = "Please login to continue."


class ConflictError(PortalError):
    error_code = "conflict"
    status_code = 409
    default_message = "This record already exists."


class AlreadyRegisteredError(ConflictError):
    error_code = "already_registered"
    default_message = "You are already registered for this event."


class AlreadyEncouragedError(ConflictError):
    error_code = "already_encouraged"
    default_message = "You have already encouraged this employee."


class NotFoundError(PortalError):
    error_code = "not_found"
    status_code = 404
    default_message = "Not found."


class BackendError(PortalError):
    error_code = "backend_error"


class AuthProviderError(PortalError):
    error_code = "auth_error"
    status_code = 400
    default_message = "Authentication failed."


class UpstreamError(PortalError):
    error_code = "upstream_error"
    status_code = 502
    default_message = "Service unavailable. Please try again later."


class RateLimitedError(UpstreamError):
    error_code = "rate_limited"
    status_code = 429
    default_message = "Service is busy. Please try again in a moment."


class StorageError(UpstreamError):
    error_code = "storage_error"
    default_message = "Failed to upload image. Please try again."


class ConfigurationError(PortalError):
    error_code = "configuration_error"
    status_code = 500
