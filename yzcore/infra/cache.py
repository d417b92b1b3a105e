"""In-memory cache of pushable rolls, keyed by roll id."""

from __future__ import annotations

import logging
import time

from yzcore.modules.dice.roll import YearZeroRoll

logger = logging.getLogger("yz-core.cache")


class RollCache:
    """TTL-based cache that only ever hands back rolls that can still be pushed."""

    def __init__(self, default_ttl: int = 3600, max_size: int | None = None) -> None:
        self._store: dict[str, tuple[YearZeroRoll, float]] = {}
        self._default_ttl = default_ttl
        self._max_size = max_size

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, roll_id: str) -> bool:
        # Unlike get(), a membership test never evicts.
        entry = self._store.get(roll_id)
        if entry is None:
            return False
        roll, expires_at = entry
        return time.time() <= expires_at and roll.pushable

    def get(self, roll_id: str) -> YearZeroRoll | None:
        entry = self._store.get(roll_id)
        if entry is None:
            return None
        roll, expires_at = entry
        if time.time() > expires_at or not roll.pushable:
            del self._store[roll_id]
            return None
        return roll

    def set(self, roll: YearZeroRoll, ttl: int | None = None) -> bool:
        """Cache ``roll`` if it is pushable.

        Returns:
            True if the roll was cached.

        Raises:
            TypeError: If ``roll`` is not a YearZeroRoll.
        """
        if not isinstance(roll, YearZeroRoll):
            raise TypeError(f"Can only cache YearZeroRoll objects, got {type(roll).__name__}")
        if not roll.pushable:
            self._store.pop(roll.id, None)
            return False
        ttl = ttl if ttl is not None else self._default_ttl
        self._store.pop(roll.id, None)
        self._store[roll.id] = (roll, time.time() + ttl)
        if self._max_size is not None:
            while len(self._store) > self._max_size:
                oldest = next(iter(self._store))
                del self._store[oldest]
                logger.debug("Evicted roll %s (cache full)", oldest)
        return True

    def delete(self, roll_id: str) -> None:
        self._store.pop(roll_id, None)

    def clear(self) -> None:
        self._store.clear()
        logger.warning("Roll cache cleansed.")
