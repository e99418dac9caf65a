from __future__ import annotations


class InvalidParameterError(ValueError):
    """
    Raised when caller inputs or options fail precondition checks.

    Related: ...application.services.input_validation
    """
