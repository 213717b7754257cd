"""Service-level error kinds.

Learn: Services never build HTTP responses. They raise a ServiceError
whose `kind` says what went wrong; a single exception handler in
main.py translates the kind into a status code. Routes stay free of
try/except ladders and every service is usable outside FastAPI.
"""

import enum


class ErrorKind(str, enum.Enum):
    DUPLICATE_IDENTITY = "duplicate_identity"
    NOT_FOUND = "not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_ARGUMENT = "invalid_argument"


class ServiceError(Exception):
    """Base class for expected, client-recoverable failures."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class DuplicateIdentityError(ServiceError):
    """An account with this email already exists."""

    kind = ErrorKind.DUPLICATE_IDENTITY


class NotFoundError(ServiceError):
    """The referenced account or task does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidCredentialsError(ServiceError):
    """Password did not match the stored digest."""

    kind = ErrorKind.INVALID_CREDENTIALS


class InvalidArgumentError(ServiceError):
    kind = ErrorKind.INVALID_ARGUMENT


# Status code per error kind, used by the HTTP boundary
HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_IDENTITY: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.INVALID_ARGUMENT: 400,
}
