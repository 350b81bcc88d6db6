"""
Error types raised by the data-access layer.

Store errors are not wrapped: constraint violations surface as
sqlalchemy.exc.IntegrityError and connectivity failures as
sqlalchemy.exc.OperationalError. The aliases below name them for callers.
"""
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm.exc import NoResultFound

ConstraintViolationError = IntegrityError
ConnectivityError = OperationalError


class NotFoundError(NoResultFound):
    """A single-record lookup matched no rows."""

    def __init__(self, entity: str, **criteria):
        self.entity = entity
        self.criteria = criteria
        described = ", ".join(f"{key}={value!r}" for key, value in criteria.items())
        super().__init__(f"{entity} not found ({described})")


class ConfigurationError(RuntimeError):
    """The query facade or the application settings are not usable."""
