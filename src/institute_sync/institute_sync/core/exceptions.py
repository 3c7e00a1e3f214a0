class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when the bearer token is absent or malformed."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a token or admin password does not match."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    """Raised when a record would duplicate an existing one."""

    status_code = 409


class InternalError(DomainError):
    """Raised when an operation failed unexpectedly (I/O, corrupt input)."""

    status_code = 500
