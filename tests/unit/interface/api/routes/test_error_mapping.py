"""Unit tests for domain error to HTTP mapping."""

import pytest

from agency.domain.error import (
    ConflictError,
    DomainError,
    InvalidEmailError,
    NotFoundError,
    TokenAlreadyUsedError,
    TokenEmailMismatchError,
    TokenExpiredError,
    TokenNotFoundError,
    ValidationError,
)
from agency.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        ("error", "status_code", "code"),
        [
            (TokenExpiredError("a@example.com"), 410, "token_expired"),
            (TokenAlreadyUsedError("a@example.com"), 410, "token_already_used"),
            (
                TokenEmailMismatchError("a@example.com", "b@example.com"),
                400,
                "token_email_mismatch",
            ),
            (TokenNotFoundError("abcd1234"), 404, "not_found"),
            (NotFoundError("Agent", "123"), 404, "not_found"),
            (ConflictError("taken"), 409, "conflict"),
            (InvalidEmailError("nope"), 400, "validation_error"),
            (ValidationError("bad"), 400, "validation_error"),
            (DomainError("boom"), 500, "domain_error"),
        ],
    )
    def test_status_and_code(self, error, status_code, code):
        # Act
        exc = to_http_exception(error)

        # Assert
        assert exc.status_code == status_code
        assert exc.detail["code"] == code
        assert exc.detail["message"] == str(error)
