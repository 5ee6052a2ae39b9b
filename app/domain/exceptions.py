"""Errors raised by use cases and translated by the API layer."""


class DomainError(ValueError):
    """Base class for expected business failures."""


class NotFoundError(DomainError):
    """The requested record does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found")


class ConflictError(DomainError):
    """A uniqueness rule would be violated."""


class AuthenticationError(DomainError):
    """Credentials are missing or could not be verified."""


__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
]
