"""Domain-level exceptions.

Every failure the catalogue can report is a subclass of DomainException
so the CLI layer can catch them uniformly and display a short message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or request violates an invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist.

    Repositories never raise this; lookups return None. Use cases raise it
    when the caller asked for something specific that is not there.
    """


class StorageError(DomainException):
    """The backing store failed (I/O, corrupt data, database error)."""
