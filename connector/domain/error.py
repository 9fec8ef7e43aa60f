"""Domain layer errors.

Every domain error carries a stable machine-readable ``kind`` and a message
that is safe to show to the caller. The interface layer maps kinds to HTTP
status codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error kinds."""

    UNAUTHORIZED = "unauthorized"
    INVALID_CREDENTIALS = "invalid_credentials"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    ENTRY_NOT_FOUND = "entry_not_found"
    ALREADY_LIKED = "already_liked"
    NOT_LIKED = "not_liked"
    USER_EXISTS = "user_exists"
    VALIDATION_ERROR = "validation_error"
    STORAGE_ERROR = "storage_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    SERVER_ERROR = "server_error"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.SERVER_ERROR

    def __init__(self, message: str = "Server error"):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    kind = ErrorKind.VALIDATION_ERROR


class UnauthorizedError(DomainError):
    """Raised when a request carries no valid session token.

    Missing, malformed and expired tokens all produce the same message.
    """

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("No valid token, authorization denied")


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not match a user."""

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"User is not authorized to modify this {resource}")


class NotFoundError(DomainError):
    """Raised when a requested aggregate is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class EntryNotFoundError(DomainError):
    """Raised when a nested entry is absent from its aggregate."""

    kind = ErrorKind.ENTRY_NOT_FOUND

    def __init__(self, entry: str, identifier: str):
        self.entry = entry
        self.identifier = identifier
        super().__init__(f"{entry} does not exist")


class AlreadyLikedError(DomainError):
    """Raised when a user likes a post they already like."""

    kind = ErrorKind.ALREADY_LIKED

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Post already liked")


class NotLikedError(DomainError):
    """Raised when a user unlikes a post they have not liked."""

    kind = ErrorKind.NOT_LIKED

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Post has not yet been liked")


class UserAlreadyExistsError(DomainError):
    """Raised when registering an email that is already taken."""

    kind = ErrorKind.USER_EXISTS

    def __init__(self) -> None:
        super().__init__("User already exists")


class StorageError(DomainError):
    """Raised when the storage collaborator fails.

    The driver error is kept as ``__cause__`` for logging only.
    """

    kind = ErrorKind.STORAGE_ERROR

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__("Server error")


class ExternalServiceError(DomainError):
    """Raised when an external HTTP service cannot be reached."""

    kind = ErrorKind.EXTERNAL_SERVICE_ERROR

    def __init__(self, service: str):
        self.service = service
        super().__init__(f"{service} is unavailable")


class TokenSigningError(DomainError):
    """Raised when a session token cannot be issued."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(self) -> None:
        super().__init__("Server error")
