from __future__ import annotations

import random
import uuid
from datetime import UTC, datetime
from typing import Set

SEED_MAX = 2**31 - 1


class RandomElementIdentity:
    """Random ids and seeds, unique within the lifetime of one instance."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._issued_ids: Set[str] = set()
        self._issued_seeds: Set[int] = set()

    def next_id(self) -> str:
        while True:
            candidate = uuid.UUID(int=self._rng.getrandbits(128), version=4).hex[:16]
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def next_seed(self) -> int:
        while True:
            candidate = self._rng.randint(1, SEED_MAX)
            if candidate not in self._issued_seeds:
                self._issued_seeds.add(candidate)
                return candidate

    def timestamp(self) -> int:
        return int(datetime.now(UTC).timestamp() * 1000)


class SequentialElementIdentity:
    """Deterministic identity source for reproducible documents."""

    def __init__(self, prefix: str = "el", first_seed: int = 1, timestamp: int = 0) -> None:
        self.prefix = prefix
        self._next_index = 1
        self._next_seed = first_seed
        self._timestamp = timestamp

    def next_id(self) -> str:
        element_id = f"{self.prefix}-{self._next_index}"
        self._next_index += 1
        return element_id

    def next_seed(self) -> int:
        seed = self._next_seed
        self._next_seed += 1
        return seed

    def timestamp(self) -> int:
        return self._timestamp
