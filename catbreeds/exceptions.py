"""Catalog error taxonomy."""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ValidationError(CatalogError):
    """A breed record is malformed: missing required field or inverted bound."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(CatalogError):
    """Lookup by id matched nothing."""


class StoreError(CatalogError):
    """The persistence layer failed (I/O, corruption, constraint)."""


class QuizStateError(CatalogError):
    """An invalid quiz transition was requested."""
