"""
Record service: creation, guided input, guided edit and display of records.

All user interaction goes through a ``Console``. The service asks for one raw
line at a time, validates it and either reprompts (mandatory fields) or falls
back to a default (optional fields). Role-specific behaviour is picked from
per-role handler tables keyed on the record's role tag.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional, Union

from ..core.entities import Person, Teacher, Admin, Student, RECORD_TYPES
from ..core.enums import Role, TELEPHONE_LENGTH, EMPTY_SUBJECT
from ..core.exceptions import InvalidRoleError
from ..core.interfaces import Console


logger = logging.getLogger(__name__)

SEPARATOR = "-" * 50
INVALID_OPTIONAL_WARNING = ">>> Invalid input. Set to 0."
ADMIN_INVALID_WARNING = ">>> Invalid. Set to 0."

# Largest magnitude a salary may have (96-bit, 28-digit decimal)
MAX_SALARY = Decimal("79228162514264337593543950335")
INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Plain decimal with optional "," group separators; no exponent
_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9,]*(?:\.[0-9]*)?")
_YES = ("yes", "y")
_NO = ("no", "n")


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def is_valid_telephone(text: Optional[str]) -> bool:
    """Exactly ``TELEPHONE_LENGTH`` ASCII decimal digits."""
    return (
        text is not None
        and len(text) == TELEPHONE_LENGTH
        and text.isascii()
        and text.isdigit()
    )


def parse_salary(text: str) -> Optional[Decimal]:
    """Parse a non-negative decimal such as ``1,250.50``, or return None.

    Group separators are allowed; exponents, NaN and Infinity are not, and
    the magnitude may not exceed ``MAX_SALARY``.
    """
    text = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(text) or not any(c.isdigit() for c in text):
        return None
    try:
        value = Decimal(text.replace(",", ""))
    except InvalidOperation:
        return None
    if value < 0 or value > MAX_SALARY:
        return None
    # "-0" parses as a signed zero
    return value if value else Decimal(0)


def parse_int(text: str) -> Optional[int]:
    """Parse an optionally signed 32-bit integer, or return None."""
    text = text.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    return f"{symbol}{amount:,.2f}"


class RecordService:
    """Runs the prompt/validate protocol for roster records."""

    def __init__(self, console: Console, currency_symbol: str = "$"):
        self._console = console
        self._currency_symbol = currency_symbol
        self._input_handlers: Dict[Role, Callable[[Person], None]] = {
            Role.TEACHER: self._input_teacher,
            Role.ADMIN: self._input_admin,
            Role.STUDENT: self._input_student,
        }
        self._edit_handlers: Dict[Role, Callable[[Person], None]] = {
            Role.TEACHER: self._edit_teacher,
            Role.ADMIN: self._edit_admin,
            Role.STUDENT: self._edit_student,
        }
        self._display_handlers: Dict[Role, Callable[[Person], List[str]]] = {
            Role.TEACHER: self._display_teacher,
            Role.ADMIN: self._display_admin,
            Role.STUDENT: self._display_student,
        }

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_record(self, role: Union[Role, str, None]) -> Person:
        """Build a record with placeholder values for the given role."""
        resolved = Role.parse(role)
        if resolved is None:
            raise InvalidRoleError(role)
        return RECORD_TYPES[resolved]()

    # ------------------------------------------------------------------
    # Guided input
    # ------------------------------------------------------------------

    def run_guided_input(self, record: Person) -> Person:
        """Fill a new record from the console, reprompting mandatory fields."""
        record.name = self._require(
            "Enter Name (Required): ",
            lambda text: not is_blank(text),
            ">>> Error: Name cannot be empty.",
        )
        record.telephone = self._require(
            f"Enter Telephone ({TELEPHONE_LENGTH} digits, Required): ",
            is_valid_telephone,
            f">>> Error: Phone must be exactly {TELEPHONE_LENGTH} digits.",
        )
        record.email = self._require(
            "Enter Email (Required): ",
            lambda text: not is_blank(text),
            ">>> Error: Email cannot be empty.",
        )
        self._input_handlers[record.role](record)
        return record

    def _require(self, prompt: str, is_valid: Callable[[str], bool], error: str) -> str:
        while True:
            text = self._console.read_line(prompt)
            if is_valid(text):
                return text
            self._console.write_line(error)

    def _input_salary(self, warning: str = INVALID_OPTIONAL_WARNING) -> Decimal:
        text = self._console.read_line("Enter Salary (Optional, Enter to skip): ")
        if is_blank(text):
            return Decimal(0)
        value = parse_salary(text)
        if value is None:
            self._console.write_line(warning)
            return Decimal(0)
        return value

    def _input_subjects(self, slots: int) -> List[str]:
        subjects = []
        for number in range(1, slots + 1):
            text = self._console.read_line(f"Enter Subject {number} (Optional): ")
            subjects.append(EMPTY_SUBJECT if is_blank(text) else text)
        return subjects

    def _input_teacher(self, record: Teacher) -> None:
        record.salary = self._input_salary()
        record.subjects = self._input_subjects(record.subject_slots)

    def _input_admin(self, record: Admin) -> None:
        record.salary = self._input_salary(ADMIN_INVALID_WARNING)

        text = self._console.read_line("Is Full-time? (yes/no, Optional): ")
        record.is_full_time = not is_blank(text) and text.lower() in _YES

        text = self._console.read_line("Enter Working Hours (Optional): ")
        if is_blank(text):
            record.working_hours = 0
        else:
            hours = parse_int(text)
            if hours is None:
                self._console.write_line(ADMIN_INVALID_WARNING)
                hours = 0
            record.working_hours = hours

    def _input_student(self, record: Student) -> None:
        record.subjects = self._input_subjects(record.subject_slots)

    # ------------------------------------------------------------------
    # Guided edit
    # ------------------------------------------------------------------

    def run_guided_edit(self, record: Person) -> Person:
        """Update a record in place; blank answers keep the current value.

        Invalid optional values are ignored without a warning, unlike guided
        input which warns and resets them to zero.
        """
        self._console.write_line("--- Editing Common Info (Press Enter to keep current) ---")

        text = self._console.read_line(f"Name ({record.name}): ")
        if not is_blank(text):
            record.name = text

        while True:
            text = self._console.read_line(f"Telephone ({record.telephone}): ")
            if not text:
                break
            if is_valid_telephone(text):
                record.telephone = text
                break
            self._console.write_line(f">>> Error: Must be {TELEPHONE_LENGTH} digits.")

        text = self._console.read_line(f"Email ({record.email}): ")
        if not is_blank(text):
            record.email = text

        self._edit_handlers[record.role](record)
        record.touch()
        logger.info("Edited %s record %s (version %d)", record.role.value, record.id, record.version)
        return record

    def _edit_salary(self, record: Union[Teacher, Admin]) -> None:
        text = self._console.read_line(f"Salary ({record.salary}): ")
        if is_blank(text):
            return
        value = parse_salary(text)
        if value is None:
            logger.debug("Ignored invalid salary %r for record %s", text, record.id)
            return
        record.salary = value

    def _edit_subjects(self, record: Union[Teacher, Student]) -> None:
        self._console.write_line("--- Edit Subjects (Press Enter to keep) ---")
        for index in range(record.subject_slots):
            text = self._console.read_line(f"Subject {index + 1} ({record.subject_label(index)}): ")
            if not is_blank(text):
                record.set_subject(index, text)

    def _edit_teacher(self, record: Teacher) -> None:
        self._edit_salary(record)
        self._edit_subjects(record)

    def _edit_admin(self, record: Admin) -> None:
        self._edit_salary(record)

        current = "yes" if record.is_full_time else "no"
        text = self._console.read_line(f"Is Full-time? ({current}): ")
        if not is_blank(text):
            answer = text.strip().lower()
            if answer in _YES:
                record.is_full_time = True
            elif answer in _NO:
                record.is_full_time = False
            else:
                logger.debug("Ignored invalid full-time answer %r for record %s", text, record.id)

        text = self._console.read_line(f"Working Hours ({record.working_hours}): ")
        if not is_blank(text):
            hours = parse_int(text)
            if hours is None:
                logger.debug("Ignored invalid working hours %r for record %s", text, record.id)
            else:
                record.working_hours = hours

    def _edit_student(self, record: Student) -> None:
        self._edit_subjects(record)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def render_display(self, record: Person) -> List[str]:
        """Lines describing a record; does not touch the console."""
        lines = [
            SEPARATOR,
            f"Role:  {record.role.value}",
            f"Name:  {record.name}",
            f"Phone: {record.telephone}",
            f"Email: {record.email}",
        ]
        lines.extend(self._display_handlers[record.role](record))
        lines.append(SEPARATOR)
        return lines

    def display(self, record: Person) -> None:
        """Write a record's display lines to the console."""
        for line in self.render_display(record):
            self._console.write_line(line)

    def _display_subjects(self, record: Union[Teacher, Student]) -> List[str]:
        return [
            f"Subject {index + 1}: {record.subject_label(index)}"
            for index in range(record.subject_slots)
        ]

    def _display_teacher(self, record: Teacher) -> List[str]:
        lines = [f"Salary: {format_currency(record.salary, self._currency_symbol)}"]
        lines.extend(self._display_subjects(record))
        return lines

    def _display_admin(self, record: Admin) -> List[str]:
        return [
            f"Salary: {format_currency(record.salary, self._currency_symbol)}",
            f"Type: {record.employment_type}",
            f"Working Hours: {record.working_hours}",
        ]

    def _display_student(self, record: Student) -> List[str]:
        return self._display_subjects(record)
