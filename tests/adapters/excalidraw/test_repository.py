from __future__ import annotations

from pathlib import Path

import pytest

from adapters.excalidraw.repository import FileSystemExcalidrawRepository
from adapters.filesystem.json_utils import JsonPayloadError, load_json_object
from app.diagram_wiring import create_flowchart
from domain.services.element_identity import SequentialElementIdentity
from tests.helpers.diagram_fixtures import flowchart_payload


def test_save_writes_scene_file(tmp_path: Path) -> None:
    payload = flowchart_payload()
    document = create_flowchart(
        payload["nodes"], payload["edges"], SequentialElementIdentity()
    ).document
    target = tmp_path / "nested" / "flow.excalidraw"
    repo = FileSystemExcalidrawRepository()

    repo.save(document, target)

    assert target.exists()
    assert not target.with_suffix(".excalidraw.tmp").exists()
    assert repo.load(target) == document.to_scene()


def test_load_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(JsonPayloadError, match="JSON object"):
        load_json_object(path)


def test_load_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{nope", encoding="utf-8")

    with pytest.raises(JsonPayloadError, match="not valid JSON"):
        load_json_object(path)
