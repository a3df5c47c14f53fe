"""
Enumerations and constants for the EdCentre roster.
"""

from enum import Enum
from typing import Optional, Union


class Role(Enum):
    """Role tag of a roster record."""
    TEACHER = "Teacher"
    ADMIN = "Admin"
    STUDENT = "Student"

    @classmethod
    def parse(cls, value: Union["Role", str, None]) -> Optional["Role"]:
        """Resolve a role from an enum member or a case-insensitive name."""
        if isinstance(value, Role):
            return value
        if value is None:
            return None
        for role in cls:
            if role.value.lower() == value.lower():
                return role
        return None


class MenuOption(Enum):
    """Main menu choices as typed by the user."""
    ADD = "1"
    VIEW_ALL = "2"
    VIEW_BY_GROUP = "3"
    EDIT = "4"
    DELETE = "5"
    EXIT = "6"


# Role submenu shown by "Add New Data"
ROLE_CHOICES = {
    "1": Role.TEACHER,
    "2": Role.ADMIN,
    "3": Role.STUDENT,
}

SUBJECT_SLOTS = {
    Role.TEACHER: 2,
    Role.STUDENT: 3,
}

TELEPHONE_LENGTH = 10
EMPTY_SUBJECT = ""
NOT_AVAILABLE = "N/A"

DEFAULT_NAME = "Unknown"
DEFAULT_TELEPHONE = "0000000000"
DEFAULT_EMAIL = "N/A"
