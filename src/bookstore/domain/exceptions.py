"""Domain-level exceptions.

Every failure a caller can recover from is a subclass of DomainException,
so the CLI layer can catch them in one place and print a short message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant was rejected."""


class EntityNotFoundError(DomainException):
    """No book is registered under the requested ISBN."""


class ItemUnavailableError(DomainException):
    """The book exists but cannot be sold in the requested quantity."""
