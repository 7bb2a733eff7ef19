"""Email identity normalization.

The normalized email is the merge key for invitation events: two raw
strings that normalize equal belong to the same invitation even if they
were captured with different casing or whitespace.
"""

from agency.domain.error import InvalidEmailError


def normalize_email(raw: str) -> str:
    """Canonicalize an email to its merge key.

    Args:
        raw: Email as typed by a user or stored on an event

    Returns:
        Trimmed, lower-cased email

    Raises:
        InvalidEmailError: If the result contains no '@'
    """
    email = raw.strip().lower()
    if "@" not in email:
        raise InvalidEmailError(raw)
    return email


def emails_match(a: str, b: str) -> bool:
    """Check whether two raw emails are the same invitation identity."""
    return normalize_email(a) == normalize_email(b)
