"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so callers
(the CLI today, HTTP handlers elsewhere) can catch them uniformly and map
them to a response.  Resolution misses and ledger drift are never raised;
they are logged and degraded to placeholder values instead.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required input is missing or malformed."""


class InvalidInventoryError(ValidationError):
    """An inventory record lacks its product-line or token-line id."""


class MissingTenantError(ValidationError):
    """The request context carries no tenant identifier."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConfigurationError(DomainException):
    """A required collaborator was not wired into a handler."""


class RepositoryError(DomainException):
    """A backing store could not be read."""
