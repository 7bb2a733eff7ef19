"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from agency.domain.model import (
    EVENT_TYPES,
    AgentAccountCreated,
    AgentApproved,
    InvitationEvent,
    InvitationSent,
    SuspensionRecord,
)
from agency.domain.value import (
    AgentId,
    EventId,
    InvitationEventKind,
    LandlordId,
    SuspensionReason,
    UserId,
)


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def event_to_dict(event: InvitationEvent) -> Dict[str, Any]:
    """Convert an invitation event to a database dict.

    The sequence column is generated by the database and is never written.

    Args:
        event: Invitation event

    Returns:
        Dict suitable for database insertion
    """
    row: Dict[str, Any] = {
        "id": event.id,
        "kind": event.kind.value,
        "email": event.email,
        "landlord_id": event.landlord_id,
        "first_name": event.first_name,
        "last_name": event.last_name,
        "phone": event.phone,
        "issued_at": event.issued_at,
        "token": None,
        "expires_at": None,
        "agent_id": None,
        "agent_user_id": None,
    }
    if isinstance(event, InvitationSent):
        row["token"] = event.token.root
        row["expires_at"] = event.expires_at
    elif isinstance(event, (AgentAccountCreated, AgentApproved)):
        row["agent_id"] = event.agent_id
        row["agent_user_id"] = event.agent_user_id
    return row


def _base_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": EventId(_uuid(row["id"])),
        "email": row["email"],
        "landlord_id": LandlordId(_uuid(row["landlord_id"])),
        "first_name": row.get("first_name"),
        "last_name": row.get("last_name"),
        "phone": row.get("phone"),
        "issued_at": row["issued_at"],
        "sequence": row.get("sequence"),
    }


def row_to_sent(row: Dict[str, Any]) -> InvitationSent:
    """Convert a SENT database row to an invitation event.

    Args:
        row: Database row as dict

    Returns:
        The SENT event

    Raises:
        ValueError: If the row holds another kind of event
    """
    if row["kind"] != InvitationEventKind.SENT.value:
        raise ValueError(f"Expected a sent event row, got {row['kind']!r}")
    return InvitationSent.model_validate(
        {
            **_base_fields(row),
            "token": row["token"],
            "expires_at": row["expires_at"],
        }
    )


def row_to_event(row: Dict[str, Any]) -> InvitationEvent:
    """Convert database row to an invitation event.

    Args:
        row: Database row as dict

    Returns:
        The event subtype matching the row's kind
    """
    kind = InvitationEventKind(row["kind"])
    if kind == InvitationEventKind.SENT:
        return row_to_sent(row)
    fields = _base_fields(row)
    fields["agent_id"] = AgentId(_uuid(row["agent_id"]))
    fields["agent_user_id"] = UserId(_uuid(row["agent_user_id"]))
    return EVENT_TYPES[kind].model_validate(fields)


def suspension_to_dict(record: SuspensionRecord) -> Dict[str, Any]:
    """Convert a suspension record to a database dict.

    Args:
        record: Suspension record

    Returns:
        Dict suitable for database upsert
    """
    data = record.model_dump()
    data["reason_code"] = record.reason_code.value
    return data


def row_to_suspension(row: Dict[str, Any]) -> SuspensionRecord:
    """Convert database row to a suspension record.

    Args:
        row: Database row as dict

    Returns:
        Suspension record
    """
    return SuspensionRecord(
        agent_id=AgentId(_uuid(row["agent_id"])),
        landlord_id=LandlordId(_uuid(row["landlord_id"])),
        reason_code=SuspensionReason(row["reason_code"]),
        reason_text=row.get("reason_text"),
        notes=row.get("notes"),
        duration_days=row["duration_days"],
        started_at=row["started_at"],
        ends_at=row["ends_at"],
    )
