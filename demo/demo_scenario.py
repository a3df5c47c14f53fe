#!/usr/bin/env python3
"""
Demo scenario for the EdCentre roster console.

Replays a scripted session against the menu shell and prints what an operator
would have seen on screen.
"""

import sys
import os
import json

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from edcentre.config import ShellConfig
from edcentre.core.enums import Role
from edcentre.main import EducationCentreApp
from edcentre.services import ScriptedConsole


SESSION = [
    # Add a teacher, with one invalid phone attempt
    "1", "1", "Maria Montessori", "12345", "0211112222", "maria@edcentre.example",
    "65000", "Biology", "",
    # Add an admin, leaving the optional fields blank
    "1", "2", "John Dewey", "0213334444", "john@edcentre.example", "", "", "",
    # Add two students that share a name
    "1", "3", "Alice", "0215556666", "alice1@edcentre.example", "English", "", "History",
    "1", "3", "Alice", "0217778888", "alice2@edcentre.example", "", "", "",
    # View all, then only students
    "2",
    "3", "student",
    # Edit the teacher's salary and second subject
    "4", "maria montessori", "", "", "", "70000", "", "Chemistry",
    # Delete the first Alice, cancel on the second try
    "5", "ALICE", "y",
    "5", "alice", "n",
    # Exit
    "6",
]


def run_demo():
    """Run the scripted session and report the outcome."""
    print("=" * 60)
    print("EDCENTRE ROSTER CONSOLE - DEMO")
    print("=" * 60)

    config = ShellConfig(clear_screen=False, pause_after_action=False)
    console = ScriptedConsole(SESSION)
    app = EducationCentreApp(console, config)

    try:
        app.run()

        print("\n1. Session transcript...")
        for line in console.transcript:
            print(f"  {line}")

        print("\n2. Roster contents...")
        for record in app.roster.list_all():
            print(json.dumps(record.to_dict(), indent=2))

        print("\n3. Roster statistics...")
        show_statistics(app)

        print("\n" + "=" * 60)
        print("DEMO COMPLETED SUCCESSFULLY!")
        print("=" * 60)

    except Exception as e:
        print(f"\nDemo failed with error: {e}")
        import traceback
        traceback.print_exc()


def show_statistics(app):
    """Show record counts per role."""
    counts = app.roster.count_by_role()
    print(f"  Total records: {app.roster.count()}")
    for role in Role:
        print(f"  {role.value}: {counts[role]}")


if __name__ == "__main__":
    run_demo()
