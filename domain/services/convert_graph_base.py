from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Dict, List, Tuple

from domain.models import (
    DEFAULT_STROKE_COLOR,
    BlockPlacement,
    ExcalidrawElement,
    GeneratedDiagram,
    Point,
)
from domain.ports.identity import ElementIdentity
from domain.ports.layout import LayoutEngine
from domain.services.assemble_document import assemble_document
from domain.services.element_identity import RandomElementIdentity
from domain.services.excalidraw_elements import ExcalidrawElementFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphItem:
    item_id: str
    text: str
    stroke_color: str = DEFAULT_STROKE_COLOR


@dataclass(frozen=True)
class GraphLink:
    source: str
    target: str
    label: str | None = None


class GraphToExcalidrawConverter(ABC):
    """Lays out items, then links them with arrows.

    Links whose endpoints are not among the rendered items are dropped
    without error. When two items share an id the later one owns the id for
    link anchoring, while both are still drawn.
    """

    def __init__(self, layout_engine: LayoutEngine) -> None:
        self.layout_engine = layout_engine

    def render(
        self,
        items: Sequence[GraphItem],
        links: Sequence[GraphLink],
        identity: ElementIdentity | None = None,
    ) -> GeneratedDiagram:
        factory = ExcalidrawElementFactory(identity or RandomElementIdentity())
        plan = self.layout_engine.build_plan([item.item_id for item in items])
        elements: List[ExcalidrawElement] = []
        placements: Dict[str, BlockPlacement] = {}

        for item, block in zip(items, plan.blocks):
            elements.extend(
                factory.create_shape(
                    block.position.x,
                    block.position.y,
                    block.size.width,
                    block.size.height,
                    item.text,
                    item.stroke_color,
                )
            )
            placements[item.item_id] = block

        dropped = 0
        for link in links:
            source = placements.get(link.source)
            target = placements.get(link.target)
            if source is None or target is None:
                dropped += 1
                logger.debug("Dropping link %s -> %s: unknown endpoint.", link.source, link.target)
                continue
            start, end = self._link_anchors(source, target)
            elements.extend(factory.create_connector(start.x, start.y, end.x, end.y, link.label))

        diagram = GeneratedDiagram(document=assemble_document(elements))
        logger.debug(
            "Generated %d elements from %d items and %d links (%d dropped).",
            diagram.element_count,
            len(items),
            len(links),
            dropped,
        )
        return diagram

    @abstractmethod
    def _link_anchors(self, source: BlockPlacement, target: BlockPlacement) -> Tuple[Point, Point]:
        ...
