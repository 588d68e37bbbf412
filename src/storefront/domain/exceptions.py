"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A record failed validation or a business rule was violated."""


class BadRequestError(DomainException):
    """A request parameter (such as a path id) could not be interpreted."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The backing document could not be written."""
