from __future__ import annotations

from pathlib import Path
from typing import Any

from filelock import FileLock

from adapters.filesystem.json_utils import load_json_object, write_json_atomic
from domain.models import ExcalidrawDocument
from domain.ports.repositories import ExcalidrawRepository


class FileSystemExcalidrawRepository(ExcalidrawRepository):
    def load(self, path: Path) -> dict[str, Any]:
        return load_json_object(path)

    def save(self, document: ExcalidrawDocument, path: Path) -> None:
        lock_path = path.with_suffix(f"{path.suffix}.lock")
        path.parent.mkdir(parents=True, exist_ok=True)
        with FileLock(str(lock_path)):
            write_json_atomic(path, document.to_scene())
