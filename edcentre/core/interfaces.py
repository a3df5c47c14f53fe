"""
Core interfaces and abstract base classes for the EdCentre roster.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, TypeVar, Generic


T = TypeVar('T')


class Console(ABC):
    """Line-oriented request/response channel between the core and the user."""
    
    @abstractmethod
    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and return one line of raw input."""
        pass
    
    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Show one line of output."""
        pass
    
    @abstractmethod
    def clear(self) -> None:
        """Clear the screen, if the console supports it."""
        pass


class Repository(ABC, Generic[T]):
    """Abstract base class for ordered in-memory repositories."""
    
    @abstractmethod
    def append(self, entity: T) -> T:
        """Add an entity to the end of the collection."""
        pass
    
    @abstractmethod
    def list_all(self) -> Iterator[T]:
        """Iterate over every entity in insertion order."""
        pass
    
    @abstractmethod
    def find_by_name(self, name: Optional[str]) -> Optional[T]:
        """Find the first entity with the given name."""
        pass
    
    @abstractmethod
    def remove(self, entity: T) -> bool:
        """Remove an entity."""
        pass
