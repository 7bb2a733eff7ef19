"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input. Reported to the caller, never retried."""

    pass


class InvalidEmailError(ValidationError):
    """Raised when an email does not normalize to a usable address."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid email address: {raw!r}")


class ConflictError(ValidationError):
    """Raised when a write collides with existing state.

    Covers token collisions on the event log and attempts to invite or
    register an email that already belongs to a user.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TokenNotFoundError(NotFoundError):
    """No invitation was ever sent with this token."""

    def __init__(self, token_prefix: str):
        super().__init__("Invitation token", token_prefix)


class TokenRejectedError(DomainError):
    """Base for tokens that exist but cannot be redeemed."""

    code = "token_rejected"


class TokenExpiredError(TokenRejectedError):
    """The invitation expired before an account was created."""

    code = "token_expired"

    def __init__(self, email: str):
        self.email = email
        super().__init__("Invitation token has expired")


class TokenAlreadyUsedError(TokenRejectedError):
    """An account already exists for the invited email."""

    code = "token_already_used"

    def __init__(self, email: str):
        self.email = email
        super().__init__("This invitation has already been used")


class TokenEmailMismatchError(TokenRejectedError):
    """The token was issued to a different email than the one presented."""

    code = "token_email_mismatch"

    def __init__(self, expected: str, presented: str):
        self.expected = expected
        self.presented = presented
        super().__init__("Invitation token was issued to a different email address")
