"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They are translated to 400 responses by the API layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Unknown language code, negative review counter, etc.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvariantViolationError(DomainError):
    """
    Raised when an entity invariant is violated.

    Invariants are rules that must always be true for an entity
    to be in a valid state.

    Example: correct reviews can never exceed total reviews.
    """

    def __init__(self, entity: str, invariant: str) -> None:
        message = f"Invariant violation in {entity}: {invariant}"
        super().__init__(message, {"entity": entity, "invariant": invariant})
        self.entity = entity
        self.invariant = invariant
