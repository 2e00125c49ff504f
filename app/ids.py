"""
Resource Id Generator

Hands out a fresh identifier for every dish and order created during the
life of the process.
"""

import logging
import uuid
from typing import Iterable

logger = logging.getLogger(__name__)


class IdGenerator:
    """
    Random hex id source that never repeats itself.

    Ids issued by this generator and ids reserved from seed data are
    remembered, so a new id can never collide with either.

    Example:
        >>> ids = IdGenerator()
        >>> ids.reserve(["1", "2"])
        >>> new_id = ids.next()
    """

    def __init__(self) -> None:
        self._taken: set[str] = set()

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark externally created ids as taken."""
        for value in ids:
            self._taken.add(str(value))

    def next(self) -> str:
        """Return an id distinct from every issued or reserved id."""
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in self._taken:
                self._taken.add(candidate)
                return candidate
            logger.warning(f"Id collision on {candidate}, drawing again")

    def __contains__(self, value: object) -> bool:
        return value in self._taken

    def __len__(self) -> int:
        return len(self._taken)
