"""
Pytest configuration for roster tests.

Why: every test talks to the core through a scripted console, so the shared
fixtures build the console, the record service and a menu app around it.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from edcentre.config import ShellConfig
from edcentre.main import EducationCentreApp
from edcentre.services import RecordService, ScriptedConsole
from edcentre.store import RosterRepository


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def service(console: ScriptedConsole) -> RecordService:
    return RecordService(console)


@pytest.fixture
def roster() -> RosterRepository:
    return RosterRepository()


@pytest.fixture
def make_app():
    """Build an app whose console replays the given answers."""

    def _make(*responses: str, pause: bool = False, roster: RosterRepository = None):
        console = ScriptedConsole(responses)
        config = ShellConfig(clear_screen=False, pause_after_action=pause)
        return EducationCentreApp(console, config, roster=roster), console

    return _make
