from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SCENE_SOURCE = "whiteboard-diagrams"
DEFAULT_STROKE_COLOR = "#1e1e1e"
DEFAULT_FONT_FAMILY = 1
LABEL_BACKGROUND_COLOR = "#ffffff"

COMPONENT_TYPE_DEFAULT = "service"
COMPONENT_COLORS: Dict[str, str] = {
    "service": "#4c9aff",
    "database": "#ff5630",
    "frontend": "#00c875",
    "backend": "#ffab00",
}

FlowNodeType = Literal["process", "decision", "start", "end"]


def component_stroke_color(kind: str | None) -> str:
    return COMPONENT_COLORS.get(kind or COMPONENT_TYPE_DEFAULT, DEFAULT_STROKE_COLOR)


class FlowNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    text: str
    # Accepted for forward compatibility; does not change geometry or style yet.
    kind: Optional[FlowNodeType] = Field(default=None, alias="type")


class FlowEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    label: Optional[str] = None


class ArchComponent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    kind: Optional[str] = Field(default=None, alias="type")


class ArchConnection(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    label: Optional[str] = None


class FlowchartPayload(BaseModel):
    nodes: List[FlowNode] = Field(default_factory=list)
    edges: List[FlowEdge] = Field(default_factory=list)


class ArchitecturePayload(BaseModel):
    components: List[ArchComponent] = Field(default_factory=list)
    connections: List[ArchConnection] = Field(default_factory=list)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class BlockPlacement:
    block_id: str
    position: Point
    size: Size

    def center(self) -> Point:
        return Point(
            x=self.position.x + self.size.width / 2,
            y=self.position.y + self.size.height / 2,
        )

    def top_center(self) -> Point:
        return Point(x=self.position.x + self.size.width / 2, y=self.position.y)

    def bottom_center(self) -> Point:
        return Point(
            x=self.position.x + self.size.width / 2,
            y=self.position.y + self.size.height,
        )


@dataclass(frozen=True)
class LayoutPlan:
    blocks: List[BlockPlacement]


@dataclass(frozen=True)
class ElementStamp:
    """Identity and bookkeeping fields every element carries."""

    id: str
    seed: int
    version_nonce: int
    updated: int


@dataclass(frozen=True)
class ElementStyle:
    stroke_color: str = DEFAULT_STROKE_COLOR
    background_color: str = "transparent"
    fill_style: str = "solid"
    stroke_width: int = 2
    stroke_style: str = "solid"
    roughness: int = 1
    opacity: int = 100


def _common_fields(
    element_id: str,
    type_name: str,
    stamp: ElementStamp,
    position: Point,
    size: Size,
    style: ElementStyle,
) -> dict:
    return {
        "id": element_id,
        "type": type_name,
        "x": position.x,
        "y": position.y,
        "width": size.width,
        "height": size.height,
        "angle": 0,
        "strokeColor": style.stroke_color,
        "backgroundColor": style.background_color,
        "fillStyle": style.fill_style,
        "strokeWidth": style.stroke_width,
        "strokeStyle": style.stroke_style,
        "roughness": style.roughness,
        "opacity": style.opacity,
        "seed": stamp.seed,
        "version": 1,
        "versionNonce": stamp.version_nonce,
        "isDeleted": False,
        "updated": stamp.updated,
        "link": None,
        "locked": False,
    }


@dataclass(frozen=True)
class ShapeElement:
    type_name: ClassVar[str] = "rectangle"
    roundness_type: ClassVar[int] = 3

    stamp: ElementStamp
    position: Point
    size: Size
    style: ElementStyle = field(default_factory=ElementStyle)

    @property
    def id(self) -> str:
        return self.stamp.id

    def to_dict(self) -> dict:
        data = _common_fields(
            self.id, self.type_name, self.stamp, self.position, self.size, self.style
        )
        data["roundness"] = {"type": self.roundness_type}
        data["boundElements"] = []
        return data


@dataclass(frozen=True)
class LabelElement:
    type_name: ClassVar[str] = "text"

    stamp: ElementStamp
    position: Point
    size: Size
    text: str
    font_size: int
    baseline: int
    container_id: str | None
    style: ElementStyle = field(default_factory=ElementStyle)
    font_family: int = DEFAULT_FONT_FAMILY
    line_height: float = 1.25

    @property
    def id(self) -> str:
        return self.stamp.id

    def to_dict(self) -> dict:
        data = _common_fields(
            self.id, self.type_name, self.stamp, self.position, self.size, self.style
        )
        data.update(
            {
                "text": self.text,
                "fontSize": self.font_size,
                "fontFamily": self.font_family,
                "textAlign": "center",
                "verticalAlign": "middle",
                "baseline": self.baseline,
                "containerId": self.container_id,
                "originalText": self.text,
                "lineHeight": self.line_height,
            }
        )
        return data


@dataclass(frozen=True)
class ConnectorElement:
    type_name: ClassVar[str] = "arrow"
    end_arrowhead: ClassVar[str] = "arrow"

    stamp: ElementStamp
    anchor: Point
    delta: Point
    style: ElementStyle = field(default_factory=ElementStyle)

    @property
    def id(self) -> str:
        return self.stamp.id

    @property
    def points(self) -> List[List[float]]:
        return [[0, 0], [self.delta.x, self.delta.y]]

    def to_dict(self) -> dict:
        size = Size(width=self.delta.x, height=self.delta.y)
        data = _common_fields(self.id, self.type_name, self.stamp, self.anchor, size, self.style)
        data.update(
            {
                "points": self.points,
                "lastCommittedPoint": None,
                "startBinding": None,
                "endBinding": None,
                "startArrowhead": None,
                "endArrowhead": self.end_arrowhead,
            }
        )
        return data


ExcalidrawElement = Union[ShapeElement, LabelElement, ConnectorElement]


@dataclass(frozen=True)
class ExcalidrawDocument:
    elements: List[ExcalidrawElement]
    app_state: dict
    files: dict

    def to_dict(self) -> dict:
        return {
            "elements": [element.to_dict() for element in self.elements],
            "appState": dict(self.app_state),
            "files": dict(self.files),
        }

    def to_scene(self) -> dict:
        return {
            "type": "excalidraw",
            "version": 2,
            "source": SCENE_SOURCE,
            **self.to_dict(),
        }


@dataclass(frozen=True)
class GeneratedDiagram:
    document: ExcalidrawDocument

    @property
    def element_count(self) -> int:
        return len(self.document.elements)

    @property
    def counts(self) -> Dict[str, int]:
        counter = Counter(element.type_name for element in self.document.elements)
        return {
            type_name: counter.get(type_name, 0) for type_name in ("rectangle", "text", "arrow")
        }
