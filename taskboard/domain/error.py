"""Domain layer errors.

Not-found and forbidden are deliberately separate: the API does not hide
the existence of a project from callers who are not members.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the caller's role does not allow an action."""

    def __init__(self, message: str, resource: str = "", resource_id: str = ""):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(message)


class AuthenticationRequiredError(DomainError):
    """Raised when an action needs a caller identity and none was supplied."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidStateError(DomainError):
    """Raised when an entity is not in a state that allows the operation."""

    pass


class InviteNotPendingError(InvalidStateError):
    """Raised when an invite was already accepted or revoked."""

    def __init__(self, invite_id: str):
        self.invite_id = invite_id
        super().__init__("Invite not pending")


class InviteExpiredError(InvalidStateError):
    """Raised when a pending invite is past its expiry."""

    def __init__(self, invite_id: str):
        self.invite_id = invite_id
        super().__init__("Invite expired")


class CascadeDeleteError(DomainError):
    """Raised when a project deletion stops part-way through its cascade.

    Needs operator attention: the completed steps are listed on the error.
    """

    def __init__(self, project_id: str, completed_steps: list[str], cause: Exception):
        self.project_id = project_id
        self.completed_steps = completed_steps
        self.cause = cause
        super().__init__(
            f"Cascade delete of project {project_id} failed after "
            f"{completed_steps or 'no steps'}: {cause}"
        )
