from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from domain.models import ExcalidrawDocument


class ExcalidrawRepository(Protocol):
    def load(self, path: Path) -> dict[str, Any]: ...

    def save(self, document: ExcalidrawDocument, path: Path) -> None: ...


class BoardStore(Protocol):
    def save_diagram(self, board_id: str, document: ExcalidrawDocument) -> dict[str, Any]: ...

    def close(self) -> None: ...
