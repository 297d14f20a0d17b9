"""Errors raised by domain services.

Routes translate them to HTTP statuses: NotFoundError to 404,
NotAuthorizedError to 403, ValidationError to 400.
"""


class DomainError(Exception):
    """Base for every error a domain service raises on purpose."""


class ValidationError(DomainError):
    """Input breaks a domain rule (blank comment, self-follow, page 0)."""


class NotFoundError(DomainError):
    """A referenced post, comment or user does not exist."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = str(identifier)
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """The caller may not act on someone else's content."""

    def __init__(
        self, action: str, resource: str, resource_id: object, user_id: object
    ):
        self.action = action
        self.resource = resource
        self.resource_id = str(resource_id)
        self.user_id = str(user_id)
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )
