"""Base class for natter domain services."""


class Service:
    """Base class for domain services.

    Services get their repositories, clock and ID generator through the
    constructor and signal rule violations with `DomainError` subclasses.
    Each public operation opens a `<service>.<operation>` logfire span.
    """
