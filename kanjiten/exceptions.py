"""Custom exception hierarchy for Kanjiten application."""


class KanjitenError(Exception):
    """Base exception for all Kanjiten errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(KanjitenError):
    """Malformed or missing input."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class AuthError(KanjitenError):
    """Missing, invalid or expired credentials."""

    def __init__(self, message: str = "Invalid or expired session") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=401)


class NotFoundError(KanjitenError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class CustomWordNotFoundError(NotFoundError):
    """Custom word not found error."""

    def __init__(self, word_id: int) -> None:
        """Initialize with the missing word ID."""
        self.word_id = word_id
        super().__init__(f"Custom word with id {word_id} not found")


class ConflictError(KanjitenError):
    """Optimistic concurrency violation surfaced by the store."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=409)


class StorageError(KanjitenError):
    """Store collaborator failure; treated as transient and internal."""

    def __init__(self, message: str = "Storage operation failed") -> None:
        """Initialize with message and 500 status code."""
        super().__init__(message, status_code=500)
