"""Interface layer errors.

Maps domain errors onto HTTP responses. Every error body carries a
machine-readable ``code`` next to the human-readable ``message``.
"""

from fastapi import HTTPException, status

from agency.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    TokenAlreadyUsedError,
    TokenExpiredError,
    TokenRejectedError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with status code and structured detail
    """
    if isinstance(error, (TokenExpiredError, TokenAlreadyUsedError)):
        # The link was real but can never be redeemed again
        status_code = status.HTTP_410_GONE
        code = error.code
    elif isinstance(error, TokenRejectedError):
        status_code = status.HTTP_400_BAD_REQUEST
        code = error.code
    elif isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        code = "not_found"
    elif isinstance(error, ConflictError):
        status_code = status.HTTP_409_CONFLICT
        code = "conflict"
    elif isinstance(error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        code = "validation_error"
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        code = "domain_error"

    return HTTPException(
        status_code=status_code,
        detail={"code": code, "message": str(error)},
    )
