class DomainError(Exception):
    """Base exception for errors surfaced by the stats services."""


class ValidationError(DomainError):
    """Raised when request input is invalid (e.g. an unknown range)."""


class AuthenticationError(DomainError):
    """Raised when there is no usable caller identity."""


class NotFoundError(DomainError):
    """Raised when a record required to build the report does not exist."""


class StorageError(DomainError):
    """Raised when the relational store fails to answer a query."""
