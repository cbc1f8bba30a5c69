from __future__ import annotations

import json

import pytest
from lzstring import LZString  # type: ignore[import-untyped]

from adapters.excalidraw.url_encoder import (
    SceneUrlTooLongError,
    build_excalidraw_url,
    encode_scene_payload,
)
from app.diagram_wiring import create_architecture_diagram
from domain.services.element_identity import SequentialElementIdentity
from tests.helpers.diagram_fixtures import architecture_payload


def test_link_fragment_decodes_to_scene() -> None:
    payload = architecture_payload()
    scene = create_architecture_diagram(
        payload["components"], payload["connections"], SequentialElementIdentity()
    ).document.to_scene()

    url = build_excalidraw_url("https://excalidraw.example/#old", scene)

    assert url.startswith("https://excalidraw.example/#json=")
    encoded = url.split("#json=", 1)[1]
    assert encoded == encode_scene_payload(scene)
    assert json.loads(LZString().decompressFromEncodedURIComponent(encoded)) == scene


def test_link_length_limit() -> None:
    scene = {"elements": [{"text": "x" * 5000}], "appState": {}, "files": {}}

    with pytest.raises(SceneUrlTooLongError):
        build_excalidraw_url("https://excalidraw.example", scene, max_length=50)
