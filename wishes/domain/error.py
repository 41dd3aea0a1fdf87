"""Domain layer errors.

Every error carries a stable ``code`` so the interface layer can map it to
an HTTP status without inspecting message text.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error (empty content, malformed identifier, ...)."""

    code = "VALIDATION_ERROR"


class InvariantViolation(DomainError):
    """Raised when an operation would break an aggregate invariant."""

    code = "INVARIANT_VIOLATION"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None):
        self.resource = resource
        self.identifier = identifier
        if identifier is None:
            super().__init__(f"{resource} not found")
        else:
            super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when the caller has no identity allowed to perform an action."""

    code = "UNAUTHORIZED"


class SelfSupportError(DomainError):
    """Raised when an author tries to support their own wish."""

    code = "SELF_SUPPORT_NOT_ALLOWED"

    def __init__(self, message: str = "Authors cannot support their own wish."):
        super().__init__(message)


class AlreadyPostedError(DomainError):
    """Raised when an identity that already owns a wish tries to post again."""

    code = "ALREADY_POSTED"

    def __init__(self, message: str = "You have already posted a wish."):
        super().__init__(message)


class RepositoryError(DomainError):
    """Raised when the storage layer fails (unavailable, constraint violation)."""

    code = "REPOSITORY_ERROR"


class WishUpdateError(ValidationError):
    """Raised when the caller has no wish to edit."""

    code = "UPDATE_FAILED"

    def __init__(self, message: str = "Failed to update wish."):
        super().__init__(message)
