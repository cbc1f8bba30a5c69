from __future__ import annotations

from collections.abc import Sequence
from typing import Tuple

from domain.models import (
    ArchComponent,
    ArchConnection,
    BlockPlacement,
    GeneratedDiagram,
    Point,
    component_stroke_color,
)
from domain.ports.identity import ElementIdentity
from domain.services.convert_graph_base import GraphItem, GraphLink, GraphToExcalidrawConverter


class ArchitectureToExcalidrawConverter(GraphToExcalidrawConverter):
    def convert(
        self,
        components: Sequence[ArchComponent],
        connections: Sequence[ArchConnection],
        identity: ElementIdentity | None = None,
    ) -> GeneratedDiagram:
        items = [
            GraphItem(
                item_id=component.id,
                text=component.name,
                stroke_color=component_stroke_color(component.kind),
            )
            for component in components
        ]
        links = [GraphLink(conn.source, conn.target, conn.label) for conn in connections]
        return self.render(items, links, identity)

    def _link_anchors(self, source: BlockPlacement, target: BlockPlacement) -> Tuple[Point, Point]:
        return source.center(), target.center()
