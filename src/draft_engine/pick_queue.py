"""Pre-selected player queue for a drafting user."""

import logging
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class PickQueue:
    """Ordered, duplicate-free list of player ids a user wants next."""

    def __init__(self, player_ids: Optional[Iterable[str]] = None):
        self._player_ids: List[str] = []
        for player_id in player_ids or []:
            self.add(player_id)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._player_ids))

    def __len__(self) -> int:
        return len(self._player_ids)

    def __contains__(self, player_id) -> bool:
        return player_id in self._player_ids

    def as_list(self) -> List[str]:
        return list(self._player_ids)

    def add(self, player_id: str) -> bool:
        """Append a player; returns False if already queued."""
        if player_id in self._player_ids:
            return False
        self._player_ids.append(player_id)
        return True

    def remove(self, player_id: str) -> bool:
        """Drop a player if queued; returns whether anything was removed."""
        if player_id not in self._player_ids:
            return False
        self._player_ids.remove(player_id)
        logger.debug("Removed %s from pick queue", player_id)
        return True

    def reorder(self, from_index: int, to_index: int):
        """Move the entry at ``from_index`` so it ends up at ``to_index``."""
        size = len(self._player_ids)
        if not (0 <= from_index < size and 0 <= to_index < size):
            raise IndexError(
                f"Queue positions must be in range [0, {size}) "
                f"(got {from_index} -> {to_index})"
            )
        player_id = self._player_ids.pop(from_index)
        self._player_ids.insert(to_index, player_id)

    def clear(self):
        self._player_ids = []

    def first_available(self, drafted_ids: Iterable[str]) -> Optional[str]:
        """First queued player not in ``drafted_ids``."""
        drafted = set(drafted_ids)
        for player_id in self._player_ids:
            if player_id not in drafted:
                return player_id
        return None
