# internal/errors.py

from __future__ import annotations


class ComposeGenError(Exception):
    """Base exception for compose generation"""

    def __init__(self, message: str, error_code: str | None = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class TransportError(ComposeGenError):
    """Docker daemon unreachable, unauthorized or connection dropped"""

    def __init__(self, message: str):
        super().__init__(message, "TRANSPORT_ERROR")


class NotFound(ComposeGenError):
    """Container or network does not resolve"""

    def __init__(self, message: str):
        super().__init__(message, "NOT_FOUND")


class InspectionError(ComposeGenError):
    """Daemon answered an inspect call with an API error"""

    def __init__(self, message: str):
        super().__init__(message, "INSPECTION_ERROR")


class InvalidFilter(ComposeGenError):
    """Container filter is not a valid regular expression"""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_FILTER")


class SerializationError(ComposeGenError):
    """Document cannot be rendered to (or parsed from) YAML"""

    def __init__(self, message: str):
        super().__init__(message, "SERIALIZATION_ERROR")
