from http import HTTPStatus

from fastapi import HTTPException


class AppError(HTTPException):
    """Base failure carrying an HTTP status plus a ``{message, error}`` detail.

    ``error`` is the reason phrase for the status, the same shape every
    envelope exposes on the wire.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, headers: dict[str, str] | None = None):
        status = HTTPStatus(self.status_code)
        self.message = message or self.default_message
        self.error = status.phrase
        super().__init__(
            status_code=status.value,
            detail={"message": self.message, "error": self.error},
            headers=headers,
        )

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    status_code = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class MalformedError(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Malformed request"


class ConflictError(AppError):
    status_code = HTTPStatus.CONFLICT
    default_message = "Conflict"


class UnauthorizedError(AppError):
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentialsError(UnauthorizedError):
    default_message = "Invalid password"


class TokenExpiredError(UnauthorizedError):
    default_message = "Token has expired"


class TokenSignatureError(UnauthorizedError):
    default_message = "Invalid token signature"


class TokenMalformedError(UnauthorizedError):
    default_message = "Malformed token"
