from __future__ import annotations

from typing import List

from domain.models import (
    DEFAULT_STROKE_COLOR,
    LABEL_BACKGROUND_COLOR,
    ConnectorElement,
    ElementStamp,
    ElementStyle,
    ExcalidrawElement,
    LabelElement,
    Point,
    ShapeElement,
    Size,
)
from domain.ports.identity import ElementIdentity

SHAPE_LABEL_INSET = 10.0
SHAPE_LABEL_HEIGHT = 25.0
SHAPE_LABEL_RISE = 12.0
SHAPE_LABEL_FONT_SIZE = 20
SHAPE_LABEL_BASELINE = 18
EDGE_LABEL_SIZE = Size(100.0, 25.0)
EDGE_LABEL_FONT_SIZE = 16
EDGE_LABEL_BASELINE = 14
EDGE_LABEL_RISE = 20.0


class ExcalidrawElementFactory:
    """Builds rectangles, bound labels and arrows with the full Excalidraw field set.

    The factory never validates its input and never fails; every id, seed and
    version nonce is drawn from the injected identity source.
    """

    def __init__(self, identity: ElementIdentity) -> None:
        self.identity = identity

    def create_shape(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str = "",
        stroke_color: str = DEFAULT_STROKE_COLOR,
    ) -> List[ExcalidrawElement]:
        style = ElementStyle(stroke_color=stroke_color)
        shape = ShapeElement(
            stamp=self._stamp(),
            position=Point(x, y),
            size=Size(width, height),
            style=style,
        )
        elements: List[ExcalidrawElement] = [shape]
        if text:
            elements.append(
                LabelElement(
                    stamp=self._stamp(),
                    position=Point(
                        x + SHAPE_LABEL_INSET,
                        y + height / 2 - SHAPE_LABEL_RISE,
                    ),
                    size=Size(width - 2 * SHAPE_LABEL_INSET, SHAPE_LABEL_HEIGHT),
                    text=text,
                    font_size=SHAPE_LABEL_FONT_SIZE,
                    baseline=SHAPE_LABEL_BASELINE,
                    container_id=shape.id,
                    style=style,
                )
            )
        return elements

    def create_connector(
        self,
        from_x: float,
        from_y: float,
        to_x: float,
        to_y: float,
        label: str | None = "",
    ) -> List[ExcalidrawElement]:
        dx = to_x - from_x
        dy = to_y - from_y
        elements: List[ExcalidrawElement] = [
            ConnectorElement(
                stamp=self._stamp(),
                anchor=Point(from_x, from_y),
                delta=Point(dx, dy),
            )
        ]
        if label:
            mid = Point(from_x + dx / 2, from_y + dy / 2)
            elements.append(
                LabelElement(
                    stamp=self._stamp(),
                    position=Point(
                        mid.x - EDGE_LABEL_SIZE.width / 2,
                        mid.y - EDGE_LABEL_RISE,
                    ),
                    size=EDGE_LABEL_SIZE,
                    text=label,
                    font_size=EDGE_LABEL_FONT_SIZE,
                    baseline=EDGE_LABEL_BASELINE,
                    container_id=None,
                    style=ElementStyle(background_color=LABEL_BACKGROUND_COLOR),
                )
            )
        return elements

    def _stamp(self) -> ElementStamp:
        return ElementStamp(
            id=self.identity.next_id(),
            seed=self.identity.next_seed(),
            version_nonce=self.identity.next_seed(),
            updated=self.identity.timestamp(),
        )
