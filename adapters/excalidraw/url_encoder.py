from __future__ import annotations

import json
from typing import Any, cast

from lzstring import LZString  # type: ignore[import-untyped]


class SceneUrlTooLongError(ValueError):
    pass


def encode_scene_payload(scene: dict[str, Any]) -> str:
    payload = json.dumps(scene, ensure_ascii=True, separators=(",", ":"))
    encoded = LZString().compressToEncodedURIComponent(payload)
    return cast(str, encoded)


def build_excalidraw_url(
    base_url: str, scene: dict[str, Any], max_length: int | None = None
) -> str:
    clean_base = base_url.split("#", 1)[0]
    encoded = encode_scene_payload(scene)
    url = f"{clean_base}#json={encoded}"
    if max_length is not None and len(url) > max_length:
        msg = f"Scene URL is {len(url)} characters long, limit is {max_length}"
        raise SceneUrlTooLongError(msg)
    return url
