from __future__ import annotations

from typing import Protocol


class ElementIdentity(Protocol):
    """Source of element ids, seeds and timestamps for one document."""

    def next_id(self) -> str: ...

    def next_seed(self) -> int: ...

    def timestamp(self) -> int: ...
