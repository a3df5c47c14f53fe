"""
Services module containing the record protocol and console implementations.
"""

from .record_service import RecordService
from .console import TerminalConsole, ScriptedConsole

__all__ = [
    "RecordService",
    "TerminalConsole",
    "ScriptedConsole",
]
