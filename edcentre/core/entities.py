"""
Core entities for the EdCentre roster.

A record is a ``Person`` specialised by role. The role tag is fixed at
construction and decides which of the optional fields exist:

* ``Teacher``: salary and two subject slots
* ``Admin``: salary, full-time flag and working hours
* ``Student``: three subject slots

Entities only guard their own invariants (non-negative salary, fixed subject
slot count). Prompting, parsing and display live in
``edcentre.services.record_service``.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from .enums import (
    Role, SUBJECT_SLOTS, EMPTY_SUBJECT, NOT_AVAILABLE,
    DEFAULT_NAME, DEFAULT_TELEPHONE, DEFAULT_EMAIL,
)


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, timestamps and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record that the entity has been modified."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, version={self._version})"


class Person(AbstractEntity):
    """Abstract base class for every roster record."""

    def __init__(self, role: Role, **kwargs):
        super().__init__(**kwargs)
        self._role = role
        self.name = DEFAULT_NAME
        self.telephone = DEFAULT_TELEPHONE
        self.email = DEFAULT_EMAIL

    @property
    def role(self) -> Role:
        return self._role

    @abstractmethod
    def role_fields(self) -> Dict[str, Any]:
        """Role-specific fields as plain values."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'role': self._role.value,
            'name': self.name,
            'telephone': self.telephone,
            'email': self.email,
        })
        base_dict.update(self.role_fields())
        return base_dict

    def __str__(self) -> str:
        return f"{self._role.value}({self.name})"


class SalariedMixin:
    """Non-negative salary shared by Teacher and Admin."""

    _salary: Decimal

    @property
    def salary(self) -> Decimal:
        return self._salary

    @salary.setter
    def salary(self, value: Union[Decimal, int, str]) -> None:
        # Negative amounts are dropped and the previous salary stays.
        value = Decimal(value)
        if value >= 0:
            self._salary = value


class SubjectsMixin:
    """Fixed number of subject slots; an empty slot holds ``EMPTY_SUBJECT``."""

    _subjects: List[str]

    def _init_subjects(self, slots: int) -> None:
        self._subjects = [EMPTY_SUBJECT] * slots

    @property
    def subject_slots(self) -> int:
        return len(self._subjects)

    @property
    def subjects(self) -> List[str]:
        return self._subjects.copy()

    @subjects.setter
    def subjects(self, values: List[Optional[str]]) -> None:
        slots = len(self._subjects)
        cleaned = [value or EMPTY_SUBJECT for value in list(values)[:slots]]
        cleaned.extend([EMPTY_SUBJECT] * (slots - len(cleaned)))
        self._subjects = cleaned

    def set_subject(self, index: int, value: Optional[str]) -> None:
        """Set one slot by zero-based index."""
        if not 0 <= index < len(self._subjects):
            raise IndexError(f"Subject slot {index + 1} does not exist")
        self._subjects[index] = value or EMPTY_SUBJECT

    def subject_label(self, index: int) -> str:
        """Stored subject, or ``N/A`` for an empty slot."""
        return self._subjects[index] or NOT_AVAILABLE


class Teacher(SalariedMixin, SubjectsMixin, Person):
    """Teacher with a salary and two subjects."""

    def __init__(self, **kwargs):
        super().__init__(Role.TEACHER, **kwargs)
        self._salary = Decimal(0)
        self._init_subjects(SUBJECT_SLOTS[Role.TEACHER])

    def role_fields(self) -> Dict[str, Any]:
        return {
            'salary': str(self._salary),
            'subjects': self.subjects,
        }


class Admin(SalariedMixin, Person):
    """Administrative employee with salary, employment type and hours."""

    def __init__(self, **kwargs):
        super().__init__(Role.ADMIN, **kwargs)
        self._salary = Decimal(0)
        self.is_full_time = False
        # No lower bound: negative hours are accepted as entered.
        self.working_hours = 0

    @property
    def employment_type(self) -> str:
        return "Full-time" if self.is_full_time else "Part-time"

    def role_fields(self) -> Dict[str, Any]:
        return {
            'salary': str(self._salary),
            'is_full_time': self.is_full_time,
            'working_hours': self.working_hours,
        }


class Student(SubjectsMixin, Person):
    """Student enrolled in up to three subjects."""

    def __init__(self, **kwargs):
        super().__init__(Role.STUDENT, **kwargs)
        self._init_subjects(SUBJECT_SLOTS[Role.STUDENT])

    def role_fields(self) -> Dict[str, Any]:
        return {
            'subjects': self.subjects,
        }


RECORD_TYPES = {
    Role.TEACHER: Teacher,
    Role.ADMIN: Admin,
    Role.STUDENT: Student,
}
