"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries one entry per violated field constraint so callers can report
    every problem at once.
    """

    def __init__(self, details: list[dict[str, str]]):
        self.details = details
        summary = "; ".join(f"{d['field']}: {d['message']}" for d in details)
        super().__init__(summary or "Validation failed")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TransientStorageError(DomainError):
    """Raised when the underlying storage is temporarily unavailable.

    The operation made no partial mutation and can be retried from scratch.
    """

    pass
