"""
Main entry point for the EdCentre roster console.
"""

import logging
from decimal import Decimal
from typing import Optional

from .config import ShellConfig, load_config
from .core.entities import Person, Teacher, Admin, Student
from .core.enums import MenuOption, ROLE_CHOICES
from .core.exceptions import ConfigurationError, InputClosedError, InvalidRoleError
from .core.interfaces import Console
from .services import RecordService, TerminalConsole
from .store import RosterRepository


logger = logging.getLogger(__name__)

BANNER = "==========================================="
MENU_LINES = [
    BANNER,
    "        DESKTOP INFORMATION SYSTEM         ",
    BANNER,
    "1. Add New Data",
    "2. View All Existing Data",
    "3. View Data by User Group",
    "4. Edit Existing Data",
    "5. Delete Existing Data",
    "6. Exit",
    BANNER,
]


class EducationCentreApp:
    """Menu shell that drives the roster through a console."""

    def __init__(self, console: Console, config: Optional[ShellConfig] = None,
                 roster: Optional[RosterRepository] = None):
        self._console = console
        self._config = config or ShellConfig()
        self._roster = roster if roster is not None else RosterRepository()
        self._records = RecordService(console, currency_symbol=self._config.currency_symbol)
        self._running = False
        self._handlers = {
            MenuOption.ADD: self.add_record,
            MenuOption.VIEW_ALL: self.view_all,
            MenuOption.VIEW_BY_GROUP: self.view_by_group,
            MenuOption.EDIT: self.edit_record,
            MenuOption.DELETE: self.delete_record,
            MenuOption.EXIT: self.stop,
        }

    @property
    def roster(self) -> RosterRepository:
        return self._roster

    @property
    def record_service(self) -> RecordService:
        return self._records

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""
        self._running = True
        logger.info("Roster console started")
        try:
            while self._running:
                self._console.clear()
                for line in MENU_LINES:
                    self._console.write_line(line)
                choice = self._console.read_line("Please select an option (1-6): ")
                self.handle_choice(choice)
        except InputClosedError:
            logger.info("Input closed, leaving the menu")
            self._running = False
        logger.info("Roster console stopped with %d record(s)", len(self._roster))

    def handle_choice(self, choice: str) -> None:
        try:
            option = MenuOption(choice.strip())
        except ValueError:
            self._console.read_line("Invalid option. Press Enter to try again.")
            return
        self._handlers[option]()

    def stop(self) -> None:
        self._running = False

    def add_record(self) -> Optional[Person]:
        self._console.write_line("")
        self._console.write_line("--- Add New Record ---")
        self._console.write_line("Select Role: 1. Teacher | 2. Admin | 3. Student")
        choice = self._console.read_line("Choice: ")

        try:
            record = self._records.create_record(ROLE_CHOICES.get(choice.strip()))
        except InvalidRoleError as e:
            logger.debug("Rejected role choice %r: %s", choice, e.message)
            self._console.read_line("Invalid role. Press Enter.")
            return None

        self._records.run_guided_input(record)
        self._roster.append(record)
        self._console.write_line("")
        self._console.write_line("Record added successfully!")
        self._pause()
        return record

    def view_all(self) -> None:
        self._console.write_line("")
        self._console.write_line("--- All Records ---")
        if self._roster.is_empty():
            self._console.write_line("No records found.")
        else:
            for record in self._roster.list_all():
                self._records.display(record)
        self._pause()

    def view_by_group(self) -> None:
        self._console.write_line("")
        self._console.write_line("--- View by Role ---")
        role_filter = self._console.read_line("Enter role (Teacher / Admin / Student): ")

        found = False
        for record in self._roster.filter_by_role(role_filter):
            self._records.display(record)
            found = True
        if not found:
            self._console.write_line("No records found for this role.")
        self._pause()

    def edit_record(self) -> Optional[Person]:
        self._console.write_line("")
        self._console.write_line("--- Edit Record ---")
        record = self.find_person()

        if record is not None:
            self._console.write_line("")
            self._console.write_line("[ Current Details ]")
            self._records.display(record)

            self._console.write_line("")
            self._console.write_line(">>> UPDATING MODE (Press Enter to keep existing values) <<<")
            self._records.run_guided_edit(record)

            self._console.write_line("")
            self._console.write_line("Record updated successfully!")
        self._pause()
        return record

    def delete_record(self) -> bool:
        self._console.write_line("")
        self._console.write_line("--- Delete Record ---")
        record = self.find_person()
        deleted = False

        if record is not None:
            confirm = self._console.read_line(f"Are you sure you want to delete {record.name}? (y/n): ")
            if confirm.lower() == "y":
                deleted = self._roster.remove(record)
                self._console.write_line("Record deleted.")
            else:
                self._console.write_line("Cancelled.")
        self._pause()
        return deleted

    def find_person(self) -> Optional[Person]:
        """Ask for a full name and return the first matching record."""
        name = self._console.read_line("Enter the full name of the person: ")
        if not name.strip():
            return None

        record = self._roster.find_by_name(name)
        if record is None:
            self._console.write_line("Person not found.")
        return record

    def _pause(self, prompt: str = "Press Enter to return...") -> None:
        if self._config.pause_after_action:
            self._console.read_line(prompt)

    def create_sample_data(self) -> None:
        """Seed the roster with a few records for demonstration."""
        teacher = Teacher()
        teacher.name = "Grace Hopper"
        teacher.telephone = "0211234567"
        teacher.email = "grace@edcentre.example"
        teacher.salary = Decimal("72000")
        teacher.subjects = ["Computer Science", "Mathematics"]

        admin = Admin()
        admin.name = "Alan Turing"
        admin.telephone = "0217654321"
        admin.email = "alan@edcentre.example"
        admin.salary = Decimal("54000.50")
        admin.is_full_time = True
        admin.working_hours = 40

        student = Student()
        student.name = "Ada Lovelace"
        student.telephone = "0220001111"
        student.email = "ada@edcentre.example"
        student.subjects = ["Mathematics", "Physics"]

        for record in (teacher, admin, student):
            self._roster.append(record)
        logger.info("Sample data created")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="EdCentre Roster Console")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--demo", action="store_true", help="Seed sample records before starting")
    parser.add_argument("--log-level", type=str, help="Logging level (overrides configuration)")

    args = parser.parse_args(argv)

    # Load configuration
    overrides = {
        "log_level": args.log_level.upper() if args.log_level else None,
        "seed_demo_data": True if args.demo else None,
    }
    try:
        config = load_config(args.config, overrides)
    except ConfigurationError as e:
        parser.error(e.message)

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console = TerminalConsole(clear_screen=config.clear_screen)
    app = EducationCentreApp(console, config)
    if config.seed_demo_data:
        app.create_sample_data()

    try:
        app.run()
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
