"""
Request validation exceptions.
"""


class SecurityError(Exception):
    """Base exception for rejected input."""

    pass


class ValidationError(SecurityError):
    """Raised when request validation fails."""

    pass
