"""
Domain exception hierarchy.

Use cases raise these; the API layer maps each one to a single HTTP status.
Every exception carries a message that is safe to show to API callers.
"""


class PlaceholderApiError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PlaceholderApiError):
    """Raised when request input fails a required or length rule."""
    pass


class ReferenceNotFoundError(PlaceholderApiError):
    """Raised when input references an entity that does not exist."""
    pass


class NoFieldsToUpdateError(PlaceholderApiError):
    """Raised when an update request carries no updatable fields."""

    def __init__(self, message: str = "No fields to update"):
        super().__init__(message)


class DuplicateUserError(PlaceholderApiError):
    """Raised when a write would violate email/username uniqueness."""

    def __init__(self, message: str = "User with this email or username already exists"):
        super().__init__(message)


class EntityNotFoundError(PlaceholderApiError):
    """Raised when the requested entity id does not exist."""
    pass


class InvalidCredentialsError(PlaceholderApiError):
    """Raised on a failed login; never says which part was wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
