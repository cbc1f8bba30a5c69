from __future__ import annotations

from adapters.layout.column import ColumnLayoutConfig, ColumnLayoutEngine
from domain.models import Point, Size


def test_blocks_stack_in_input_order() -> None:
    plan = ColumnLayoutEngine().build_plan(["a", "b", "c"])

    assert [block.block_id for block in plan.blocks] == ["a", "b", "c"]
    assert [block.position for block in plan.blocks] == [
        Point(400, 100),
        Point(400, 330),
        Point(400, 560),
    ]
    assert all(block.size == Size(200, 80) for block in plan.blocks)


def test_duplicate_ids_keep_their_own_slot() -> None:
    plan = ColumnLayoutEngine().build_plan(["a", "a"])

    assert [block.position.y for block in plan.blocks] == [100, 330]


def test_custom_config() -> None:
    engine = ColumnLayoutEngine(
        ColumnLayoutConfig(origin=Point(0, 0), block_size=Size(10, 10), gap_y=5)
    )

    plan = engine.build_plan(["a", "b"])
    assert plan.blocks[1].position == Point(0, 15)
    assert plan.blocks[0].bottom_center() == Point(5, 10)
    assert plan.blocks[1].top_center() == Point(5, 15)


def test_empty_plan() -> None:
    assert ColumnLayoutEngine().build_plan([]).blocks == []
