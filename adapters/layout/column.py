from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from domain.models import BlockPlacement, LayoutPlan, Point, Size
from domain.ports.layout import LayoutEngine


@dataclass(frozen=True)
class ColumnLayoutConfig:
    origin: Point = Point(400, 100)
    block_size: Size = Size(200, 80)
    gap_y: float = 150.0


class ColumnLayoutEngine(LayoutEngine):
    """Stacks blocks top to bottom in input order, ignoring edge topology."""

    def __init__(self, config: ColumnLayoutConfig | None = None) -> None:
        self.config = config or ColumnLayoutConfig()

    def build_plan(self, block_ids: Sequence[str]) -> LayoutPlan:
        step = self.config.block_size.height + self.config.gap_y
        blocks = [
            BlockPlacement(
                block_id=block_id,
                position=Point(self.config.origin.x, self.config.origin.y + idx * step),
                size=self.config.block_size,
            )
            for idx, block_id in enumerate(block_ids)
        ]
        return LayoutPlan(blocks=blocks)
