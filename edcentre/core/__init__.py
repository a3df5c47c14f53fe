"""
Core module containing the record model and base classes.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Person",
    "Teacher",
    "Admin",
    "Student",
    "RECORD_TYPES",
    
    # Interfaces
    "Console",
    "Repository",
    
    # Enums
    "Role",
    "MenuOption",
    
    # Exceptions
    "EdCentreException",
    "ValidationError",
    "InvalidRoleError",
    "ConfigurationError",
    "InputClosedError",
]
