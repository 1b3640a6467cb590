"""
Request validation module for Entity Resolver Service.

Rejects malformed payloads before they reach the resolver.
"""
from .input_validator import InputValidator
from .exceptions import SecurityError, ValidationError

__all__ = [
    "InputValidator",
    "SecurityError",
    "ValidationError",
]
