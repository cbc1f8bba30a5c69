from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from domain.models import BlockPlacement, LayoutPlan, Point, Size
from domain.ports.layout import LayoutEngine


@dataclass(frozen=True)
class LayoutConfig:
    origin: Point = Point(200, 150)
    block_size: Size = Size(180, 100)
    step_x: float = 250.0
    step_y: float = 200.0
    max_cols: int = 3


class GridLayoutEngine(LayoutEngine):
    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()

    def build_plan(self, block_ids: Sequence[str]) -> LayoutPlan:
        blocks = []
        for idx, block_id in enumerate(block_ids):
            row, col = divmod(idx, self.config.max_cols)
            x = self.config.origin.x + col * self.config.step_x
            y = self.config.origin.y + row * self.config.step_y
            blocks.append(
                BlockPlacement(block_id=block_id, position=Point(x, y), size=self.config.block_size)
            )
        return LayoutPlan(blocks=blocks)
