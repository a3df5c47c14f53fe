"""
In-memory roster repository.
"""

import logging
from collections import Counter
from typing import Dict, Iterator, List, Optional, Union

from ..core.entities import Person
from ..core.enums import Role
from ..core.interfaces import Repository


logger = logging.getLogger(__name__)


class RosterRepository(Repository[Person]):
    """Ordered collection of roster records.
    
    Records keep their insertion order and are never deduplicated, so two
    records may share a name. Name lookup is first-match: with duplicates only
    the earliest record is returned until it is removed.
    """
    
    def __init__(self, records: Optional[List[Person]] = None):
        self._records: List[Person] = list(records or [])
    
    def append(self, record: Person) -> Person:
        """Add a record to the end of the roster."""
        self._records.append(record)
        logger.info("Added %s record %s", record.role.value, record.id)
        return record
    
    def list_all(self) -> Iterator[Person]:
        """Iterate over every record in insertion order."""
        for record in self._records:
            yield record
    
    def filter_by_role(self, role_filter: Union[Role, str, None]) -> Iterator[Person]:
        """Iterate over records whose role matches, ignoring case."""
        if role_filter is None:
            return
        if isinstance(role_filter, Role):
            role_filter = role_filter.value
        wanted = role_filter.lower()
        for record in self._records:
            if record.role.value.lower() == wanted:
                yield record
    
    def find_by_name(self, name: Optional[str]) -> Optional[Person]:
        """Find the first record whose name matches, ignoring case."""
        if name is None or not name.strip():
            return None
        wanted = name.lower()
        for record in self._records:
            if record.name.lower() == wanted:
                return record
        return None
    
    def remove(self, record: Person) -> bool:
        """Remove the first entry that is this very record."""
        for index, existing in enumerate(self._records):
            if existing is record:
                del self._records[index]
                logger.info("Removed %s record %s", record.role.value, record.id)
                return True
        return False
    
    def count(self) -> int:
        """Number of records in the roster."""
        return len(self._records)
    
    def is_empty(self) -> bool:
        return not self._records
    
    def count_by_role(self) -> Dict[Role, int]:
        """Number of records per role, including roles with none."""
        counts = Counter(record.role for record in self._records)
        return {role: counts.get(role, 0) for role in Role}
    
    def __len__(self) -> int:
        return len(self._records)
    
    def __iter__(self) -> Iterator[Person]:
        return self.list_all()
