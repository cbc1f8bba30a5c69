from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import ORJSONResponse

from adapters.boards.client import BoardStoreError
from app.config import AppSettings, load_settings
from app.diagram_wiring import build_board_store, create_architecture_diagram, create_flowchart
from domain.models import ArchitecturePayload, FlowchartPayload, GeneratedDiagram
from domain.ports.repositories import BoardStore

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings, board_store: BoardStore | None = None) -> FastAPI:
    store = board_store or build_board_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> Any:
        try:
            yield
        finally:
            store.close()

    app = FastAPI(title="Whiteboard Diagrams", lifespan=lifespan)

    def persist(board_id: str, diagram: GeneratedDiagram, kind: str) -> ORJSONResponse:
        try:
            store.save_diagram(board_id, diagram.document)
        except BoardStoreError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        logger.info(
            "Saved %s with %d elements to board %s.", kind, diagram.element_count, board_id
        )
        return ORJSONResponse(
            {
                "message": f"{kind} saved to board {board_id}.",
                "element_count": diagram.element_count,
                "board_id": board_id,
            }
        )

    @app.get("/health")
    def health() -> ORJSONResponse:
        return ORJSONResponse({"status": "ok"})

    @app.post("/api/diagrams/flowchart")
    def generate_flowchart(payload: FlowchartPayload) -> ORJSONResponse:
        return ORJSONResponse(diagram_payload(create_flowchart(payload.nodes, payload.edges)))

    @app.post("/api/diagrams/architecture")
    def generate_architecture(payload: ArchitecturePayload) -> ORJSONResponse:
        diagram = create_architecture_diagram(payload.components, payload.connections)
        return ORJSONResponse(diagram_payload(diagram))

    @app.post("/api/boards/{board_id}/diagram/flowchart")
    def save_flowchart(board_id: str, payload: FlowchartPayload) -> ORJSONResponse:
        return persist(board_id, create_flowchart(payload.nodes, payload.edges), "Flowchart")

    @app.post("/api/boards/{board_id}/diagram/architecture")
    def save_architecture(board_id: str, payload: ArchitecturePayload) -> ORJSONResponse:
        diagram = create_architecture_diagram(payload.components, payload.connections)
        return persist(board_id, diagram, "Architecture diagram")

    return app


def diagram_payload(diagram: GeneratedDiagram) -> dict[str, Any]:
    return {
        "element_count": diagram.element_count,
        "counts": diagram.counts,
        "document": diagram.document.to_dict(),
    }


def build_app(loader: Callable[[], AppSettings] = load_settings) -> FastAPI:
    settings = loader()
    logging.basicConfig(level=settings.log_level)
    return create_app(settings)
