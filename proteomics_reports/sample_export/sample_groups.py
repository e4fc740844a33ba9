"""
Sample group registry.
Keeps the ordered list of group names; the order becomes the sheet order.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from .config import get_config
from .exceptions import BlankNameError, DuplicateNameError


class SampleGroupRegistry:
    """Ordered, duplicate-free collection of sample group names"""

    def __init__(self, groups: Optional[Iterable[str]] = None):
        self._groups: List[str] = []
        for name in groups or []:
            self.add(name)

    @property
    def groups(self) -> Tuple[str, ...]:
        """Snapshot of the registered names in insertion order."""
        return tuple(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._groups))

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def add(self, name: str) -> str:
        """
        Register a new group.

        Args:
            name: Group name, surrounding whitespace is removed

        Returns:
            The stored name

        Raises:
            BlankNameError: if the name is empty after trimming
            DuplicateNameError: if the name is already registered
        """
        name = name.strip()
        if not name:
            raise BlankNameError()
        if name in self._groups:
            raise DuplicateNameError(name)

        self._groups.append(name)
        logger.info(f"Added sample group: {name}")
        return name

    def remove(self, name: str):
        """Remove a group by exact name; unknown names are ignored"""
        if name in self._groups:
            self._groups.remove(name)
            logger.info(f"Removed sample group: {name}")

    def load_defaults(self):
        """Replace all groups with the configured defaults"""
        self._groups = list(get_config().DEFAULT_SAMPLE_GROUPS)
        logger.info(f"Loaded default sample groups: {', '.join(self._groups)}")


def can_process(dataset_present: bool, group_count: int) -> bool:
    """Whether an export may be started"""
    return bool(dataset_present) and group_count > 0
