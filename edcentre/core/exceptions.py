"""
Custom exceptions for the EdCentre roster.
"""

from typing import Optional, Any, Dict


class EdCentreException(Exception):
    """Base exception for all EdCentre errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(EdCentreException):
    """Raised when data validation fails."""
    pass


class InvalidRoleError(ValidationError):
    """Raised when a record is requested for an unknown role tag."""
    
    def __init__(self, role: Any):
        super().__init__(
            f"Invalid role: {role!r}",
            error_code="invalid_role",
            details={"role": role},
        )
        self.role = role


class ConfigurationError(EdCentreException):
    """Raised when configuration is invalid."""
    pass


class InputClosedError(EdCentreException):
    """Raised when the console has no more input to give."""
    pass
