from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from adapters.boards.client import HttpBoardStore
from adapters.layout.column import ColumnLayoutEngine
from adapters.layout.grid import GridLayoutEngine
from app.config import AppSettings
from domain.models import (
    ArchComponent,
    ArchConnection,
    FlowEdge,
    FlowNode,
    GeneratedDiagram,
)
from domain.ports.identity import ElementIdentity
from domain.ports.repositories import BoardStore
from domain.services.convert_architecture_to_excalidraw import ArchitectureToExcalidrawConverter
from domain.services.convert_flowchart_to_excalidraw import FlowchartToExcalidrawConverter

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model: type[ModelT], values: Iterable[ModelT | Mapping[str, Any]]) -> list[ModelT]:
    return [value if isinstance(value, model) else model.model_validate(value) for value in values]


def create_flowchart(
    nodes: Iterable[FlowNode | Mapping[str, Any]],
    edges: Iterable[FlowEdge | Mapping[str, Any]],
    identity: ElementIdentity | None = None,
) -> GeneratedDiagram:
    converter = FlowchartToExcalidrawConverter(ColumnLayoutEngine())
    return converter.convert(_coerce(FlowNode, nodes), _coerce(FlowEdge, edges), identity)


def create_architecture_diagram(
    components: Iterable[ArchComponent | Mapping[str, Any]],
    connections: Iterable[ArchConnection | Mapping[str, Any]],
    identity: ElementIdentity | None = None,
) -> GeneratedDiagram:
    converter = ArchitectureToExcalidrawConverter(GridLayoutEngine())
    return converter.convert(
        _coerce(ArchComponent, components), _coerce(ArchConnection, connections), identity
    )


def build_board_store(settings: AppSettings) -> BoardStore:
    return HttpBoardStore.from_settings(settings.board_store)
