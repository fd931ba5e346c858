"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed or rule-breaking input)."""

    pass


class EmptyCommentError(ValidationError):
    """Raised when a comment has no text after trimming."""

    def __init__(self) -> None:
        super().__init__("Write a comment to submit")


class AuthenticationError(DomainError):
    """Base class for identity gate failures."""

    pass


class UnauthenticatedError(AuthenticationError):
    """Raised when no credential was presented."""

    def __init__(self, message: str = "No access token") -> None:
        super().__init__(message)


class InvalidCredentialError(AuthenticationError):
    """Raised when a credential fails verification."""

    def __init__(self, message: str = "Access token is invalid") -> None:
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreFailureError(DomainError):
    """Raised by repositories when the underlying store fails an operation."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Store operation failed ({operation}){detail}")
