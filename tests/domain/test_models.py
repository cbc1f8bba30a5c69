from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.models import (
    ArchComponent,
    FlowchartPayload,
    FlowEdge,
    FlowNode,
    GeneratedDiagram,
)
from domain.services.assemble_document import assemble_document
from domain.services.element_identity import SequentialElementIdentity
from domain.services.excalidraw_elements import ExcalidrawElementFactory


def test_edges_accept_from_and_to_keys() -> None:
    edge = FlowEdge.model_validate({"from": "a", "to": "b", "label": "go"})

    assert (edge.source, edge.target, edge.label) == ("a", "b", "go")


def test_node_type_is_exposed_as_kind() -> None:
    node = FlowNode.model_validate({"id": "a", "text": "A", "type": "decision"})

    assert node.kind == "decision"


def test_unknown_flow_node_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FlowNode.model_validate({"id": "a", "text": "A", "type": "loop"})


def test_component_kind_is_free_form() -> None:
    component = ArchComponent.model_validate({"id": "q", "name": "Queue", "type": "queue"})

    assert component.kind == "queue"


def test_payload_requires_node_ids() -> None:
    with pytest.raises(ValidationError):
        FlowchartPayload.model_validate({"nodes": [{"text": "no id"}], "edges": []})


def test_scene_envelope_and_counts() -> None:
    factory = ExcalidrawElementFactory(SequentialElementIdentity())
    elements = factory.create_shape(0, 0, 100, 50, "box")
    elements += factory.create_connector(0, 0, 5, 5, "x")
    diagram = GeneratedDiagram(document=assemble_document(elements))

    scene = diagram.document.to_scene()
    assert scene["type"] == "excalidraw"
    assert scene["version"] == 2
    assert scene["source"] == "whiteboard-diagrams"
    assert scene["files"] == {}
    assert diagram.element_count == 4
    assert diagram.counts == {"rectangle": 1, "text": 2, "arrow": 1}
