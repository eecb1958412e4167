from http import HTTPStatus


class PresignError(Exception):
    """Base error for a request that cannot be turned into a presigned URL."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class MissingParameter(PresignError):
    status_code = HTTPStatus.BAD_REQUEST


class InvalidParameter(PresignError):
    status_code = HTTPStatus.BAD_REQUEST


class SigningFailure(PresignError):
    """The signing client raised; ``detail`` holds the underlying error text."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
