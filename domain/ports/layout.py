from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from domain.models import LayoutPlan


class LayoutEngine(Protocol):
    def build_plan(self, block_ids: Sequence[str]) -> LayoutPlan:
        ...
