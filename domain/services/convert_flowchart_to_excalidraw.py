from __future__ import annotations

from collections.abc import Sequence
from typing import Tuple

from domain.models import BlockPlacement, FlowEdge, FlowNode, GeneratedDiagram, Point
from domain.ports.identity import ElementIdentity
from domain.services.convert_graph_base import GraphItem, GraphLink, GraphToExcalidrawConverter


class FlowchartToExcalidrawConverter(GraphToExcalidrawConverter):
    def convert(
        self,
        nodes: Sequence[FlowNode],
        edges: Sequence[FlowEdge],
        identity: ElementIdentity | None = None,
    ) -> GeneratedDiagram:
        items = [GraphItem(item_id=node.id, text=node.text) for node in nodes]
        links = [GraphLink(edge.source, edge.target, edge.label) for edge in edges]
        return self.render(items, links, identity)

    def _link_anchors(self, source: BlockPlacement, target: BlockPlacement) -> Tuple[Point, Point]:
        return source.bottom_center(), target.top_center()
