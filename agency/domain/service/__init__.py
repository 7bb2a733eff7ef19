"""Domain services."""

from .base import Service
from .clock import Clock, FixedClock, SystemClock
from .invitation_reducer import reduce_invitation, reduce_invitations
from .invitation_service import InvitationService
from .lifecycle_service import LifecycleService
from .suspension_service import SuspensionService
from .token_verifier import TokenVerifier

__all__ = [
    "Clock",
    "FixedClock",
    "InvitationService",
    "LifecycleService",
    "Service",
    "SuspensionService",
    "SystemClock",
    "TokenVerifier",
    "reduce_invitation",
    "reduce_invitations",
]
