from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from adapters.boards.client import BoardStoreError, HttpBoardStore
from app.config import BoardStoreSettings
from app.diagram_wiring import create_flowchart
from domain.models import ExcalidrawDocument
from domain.services.element_identity import SequentialElementIdentity
from tests.helpers.diagram_fixtures import flowchart_payload


def _document() -> ExcalidrawDocument:
    payload = flowchart_payload()
    diagram = create_flowchart(payload["nodes"], payload["edges"], SequentialElementIdentity())
    return diagram.document


def _store(
    settings: BoardStoreSettings, handler: Callable[[httpx.Request], httpx.Response]
) -> HttpBoardStore:
    return HttpBoardStore.from_settings(settings, transport=httpx.MockTransport(handler))


def test_save_diagram_patches_board_data(board_store_settings: BoardStoreSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "b1", "title": "Board"})

    document = _document()
    result = _store(board_store_settings, handler).save_diagram("b1", document)

    assert result == {"id": "b1", "title": "Board"}
    (request,) = seen
    assert request.method == "PATCH"
    assert str(request.url) == "http://boards.local/api/v1/boards/b1"
    assert request.headers["Authorization"] == "Bearer test-token"
    body = json.loads(request.content)
    assert body == {"board_data": document.to_dict()}


def test_string_detail_becomes_message(board_store_settings: BoardStoreSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Board not found"})

    with pytest.raises(BoardStoreError, match="Board not found"):
        _store(board_store_settings, handler).save_diagram("missing", _document())


def test_object_detail_prefers_message(board_store_settings: BoardStoreSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(402, json={"detail": {"message": "Quota exceeded", "limit": 3}})

    with pytest.raises(BoardStoreError, match="Quota exceeded"):
        _store(board_store_settings, handler).save_diagram("b1", _document())


def test_object_detail_without_message_is_dumped(board_store_settings: BoardStoreSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"detail": {"limit": 3}})

    with pytest.raises(BoardStoreError) as exc_info:
        _store(board_store_settings, handler).save_diagram("b1", _document())
    assert json.loads(str(exc_info.value)) == {"limit": 3}


def test_non_json_error_falls_back_to_status(board_store_settings: BoardStoreSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(BoardStoreError, match="HTTP 500"):
        _store(board_store_settings, handler).save_diagram("b1", _document())


def test_transport_error_is_wrapped(board_store_settings: BoardStoreSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(BoardStoreError, match="connection refused"):
        _store(board_store_settings, handler).save_diagram("b1", _document())


def test_missing_token_fails_before_request() -> None:
    store = HttpBoardStore.from_settings(BoardStoreSettings(api_token="  "))

    with pytest.raises(BoardStoreError, match="API token"):
        store.save_diagram("b1", _document())


def test_plain_text_success_body_is_accepted(board_store_settings: BoardStoreSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="OK")

    result = _store(board_store_settings, handler).save_diagram("b1", _document())

    assert result == {}
