"""
Console implementations: the real terminal and a scripted stand-in.
"""

import os
from typing import Iterable, List, Optional

from ..core.exceptions import InputClosedError
from ..core.interfaces import Console


class TerminalConsole(Console):
    """Console backed by stdin/stdout."""
    
    def __init__(self, clear_screen: bool = True):
        self._clear_screen = clear_screen
    
    def read_line(self, prompt: str = "") -> str:
        try:
            return input(prompt)
        except EOFError:
            raise InputClosedError("Standard input was closed", error_code="input_closed")
    
    def write_line(self, text: str = "") -> None:
        print(text)
    
    def clear(self) -> None:
        if self._clear_screen:
            os.system("cls" if os.name == "nt" else "clear")


class ScriptedConsole(Console):
    """Console that replays canned answers and records the conversation.
    
    Every prompt and written line is appended to ``transcript`` in order,
    which lets callers assert on what a user would have seen.
    """
    
    def __init__(self, responses: Optional[Iterable[str]] = None):
        self._responses: List[str] = list(responses or [])
        self._position = 0
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.transcript: List[str] = []
        self.clear_count = 0
    
    def feed(self, *responses: str) -> None:
        """Queue more answers."""
        self._responses.extend(responses)
    
    @property
    def remaining(self) -> int:
        return len(self._responses) - self._position
    
    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        self.transcript.append(prompt)
        if self._position >= len(self._responses):
            raise InputClosedError(
                f"No scripted answer for prompt {prompt!r}",
                error_code="input_closed",
                details={"prompt": prompt},
            )
        response = self._responses[self._position]
        self._position += 1
        return response
    
    def write_line(self, text: str = "") -> None:
        self.output.append(text)
        self.transcript.append(text)
    
    def clear(self) -> None:
        self.clear_count += 1
