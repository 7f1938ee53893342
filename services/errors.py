"""
Domain Errors

Exceptions raised by the services for conditions the caller must handle.
Unit conversion warnings and estimation are not errors; they are returned
alongside results.
"""


class DomainError(Exception):
    """Base class for caller-visible domain errors."""
    pass


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""
    pass


class VariantsLockedError(DomainError):
    """Raised when enrollment variants are changed after the start date."""
    pass


class UnsupportedUnitError(DomainError):
    """Raised by strict conversions when the unit token is unknown."""

    def __init__(self, unit):
        super().__init__(f"Unsupported unit: {unit}")
        self.unit = unit


class ValidationError(DomainError):
    """Raised when caller input violates a business rule."""
    pass
