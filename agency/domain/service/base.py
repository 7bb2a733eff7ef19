"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold lifecycle rules that span the event log, the
    suspension store and the user directory.
    """

    pass
