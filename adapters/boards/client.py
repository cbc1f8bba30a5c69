from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from adapters.boards.http_client import create_http_client
from domain.models import ExcalidrawDocument
from domain.ports.repositories import BoardStore

if TYPE_CHECKING:
    from app.config import BoardStoreSettings

logger = logging.getLogger(__name__)


class BoardStoreError(RuntimeError):
    """Readable failure raised for any board store request problem."""


class HttpBoardStore(BoardStore):
    def __init__(self, client: httpx.Client | None) -> None:
        self._client = client

    @classmethod
    def from_settings(
        cls, settings: BoardStoreSettings, transport: httpx.BaseTransport | None = None
    ) -> HttpBoardStore:
        if not settings.api_token:
            return cls(None)
        client = create_http_client(
            base_url=settings.api_url,
            api_token=settings.api_token,
            timeout_seconds=settings.timeout_seconds,
            transport=transport,
        )
        return cls(client)

    def save_diagram(self, board_id: str, document: ExcalidrawDocument) -> dict[str, Any]:
        if self._client is None:
            msg = "Board store API token is not configured (set WBD_BOARD_STORE__API_TOKEN)."
            raise BoardStoreError(msg)
        try:
            response = self._client.patch(
                f"/api/v1/boards/{board_id}", json={"board_data": document.to_dict()}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = error_message_from_response(exc.response)
            logger.warning(
                "Board %s update failed with HTTP %s: %s",
                board_id,
                exc.response.status_code,
                message,
            )
            raise BoardStoreError(message) from exc
        except httpx.HTTPError as exc:
            logger.warning("Board %s update failed: %s", board_id, exc)
            raise BoardStoreError(str(exc) or exc.__class__.__name__) from exc
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            logger.debug("Board %s update returned a non-JSON body.", board_id)
            return {}
        return data if isinstance(data, dict) else {"data": data}

    def close(self) -> None:
        if self._client is not None:
            self._client.close()


def error_message_from_response(response: httpx.Response) -> str:
    fallback = f"Board store responded with HTTP {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        return fallback
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if detail is None or detail == "":
        return fallback
    if isinstance(detail, dict):
        message = detail.get("message")
        if message:
            return str(message)
        return json.dumps(detail, indent=2)
    if isinstance(detail, list):
        return json.dumps(detail, indent=2)
    return str(detail)
