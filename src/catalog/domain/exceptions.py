"""Domain-level exceptions.

All catalog errors are expressed as subclasses of DomainException so the
HTTP and CLI layers can catch them uniformly and translate them into a
status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a value breaks an invariant."""


class EntityNotFoundError(DomainException):
    """A requested product or image does not exist."""


class StoreError(DomainException):
    """The backing store failed to read or write."""


class ConfigurationError(DomainException):
    """The runtime configuration cannot be used."""
