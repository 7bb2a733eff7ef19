"""Token verifier domain service."""

from datetime import datetime

import logfire

from agency.domain.error import (
    TokenAlreadyUsedError,
    TokenEmailMismatchError,
    TokenExpiredError,
    TokenNotFoundError,
)
from agency.domain.model import VerificationResult
from agency.domain.repository import InvitationEventRepository
from agency.domain.value import (
    InvitationStatus,
    InviteToken,
    emails_match,
    normalize_email,
)

from .base import Service
from .invitation_reducer import reduce_invitation


class TokenVerifier(Service):
    """Validates a presented invitation token against the reduced log.

    Single use is enforced through the derived status rather than a separate
    "used" flag: once an account exists for the invited email, every token
    for that email is spent. Verification is read-only.
    """

    def __init__(self, event_repository: InvitationEventRepository) -> None:
        """Initialize token verifier.

        Args:
            event_repository: Invitation event log
        """
        self.event_repository = event_repository

    async def verify(
        self,
        token: InviteToken,
        now: datetime,
        email_hint: str | None = None,
    ) -> VerificationResult:
        """Verify a token.

        Args:
            token: Token from the invitation link
            now: Instant at which expiry is evaluated
            email_hint: Email the caller claims the token was sent to

        Returns:
            Profile snapshot for pre-filling registration

        Raises:
            TokenNotFoundError: If no invitation carries the token
            TokenExpiredError: If the invitation expired while pending
            TokenAlreadyUsedError: If an account already exists for the email
            TokenEmailMismatchError: If the hint names a different email
            InvalidEmailError: If the hint is not an email
        """
        with logfire.span("token_verifier.verify", token=token.prefix):
            sent = await self.event_repository.find_sent_by_token(token)
            if sent is None:
                logfire.warn("Invitation token not found", token=token.prefix)
                raise TokenNotFoundError(token.prefix)

            events = await self.event_repository.query_by_email(sent.email)
            invitation = reduce_invitation(events, now)

            if invitation.status == InvitationStatus.EXPIRED:
                logfire.info(
                    "Invitation token expired",
                    token=token.prefix,
                    expires_at=invitation.expires_at.isoformat(),
                )
                raise TokenExpiredError(invitation.email)

            if invitation.has_account:
                logfire.info(
                    "Invitation token already used",
                    token=token.prefix,
                    status=invitation.status.value,
                )
                raise TokenAlreadyUsedError(invitation.email)

            # An older token can lapse while a re-invite keeps the invitation live
            if not sent.is_live_at(now):
                logfire.info(
                    "Superseded invitation token expired",
                    token=token.prefix,
                    expires_at=sent.expires_at.isoformat(),
                )
                raise TokenExpiredError(invitation.email)

            if email_hint is not None and not emails_match(email_hint, sent.email):
                logfire.warn(
                    "Invitation token email mismatch",
                    token=token.prefix,
                    expected=sent.email,
                )
                raise TokenEmailMismatchError(sent.email, normalize_email(email_hint))

            logfire.info("Invitation token verified", token=token.prefix)
            return VerificationResult(
                email=invitation.email,
                first_name=invitation.first_name,
                last_name=invitation.last_name,
                phone=invitation.phone,
                landlord_id=sent.landlord_id,
                expires_at=invitation.expires_at,
            )
