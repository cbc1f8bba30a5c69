from __future__ import annotations

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from app.config import AppSettings, BoardStoreSettings, OutputSettings
from domain.services.element_identity import SequentialElementIdentity


def _clear_wbd_env() -> None:
    for key in list(os.environ):
        if key.startswith("WBD_"):
            os.environ.pop(key, None)


_clear_wbd_env()


@pytest.fixture(autouse=True)
def clear_wbd_env() -> Generator[None, None, None]:
    _clear_wbd_env()
    yield
    _clear_wbd_env()


@pytest.fixture
def identity() -> SequentialElementIdentity:
    return SequentialElementIdentity(prefix="el", timestamp=1_700_000_000_000)


@pytest.fixture
def board_store_settings() -> BoardStoreSettings:
    return BoardStoreSettings(
        api_url="http://boards.local",
        api_token="test-token",
        timeout_seconds=5.0,
    )


@pytest.fixture
def app_settings(tmp_path: Path, board_store_settings: BoardStoreSettings) -> AppSettings:
    return AppSettings(
        board_store=board_store_settings,
        output=OutputSettings(
            scenes_dir=tmp_path / "scenes",
            excalidraw_base_url="http://testserver/excalidraw",
            max_url_length=8000,
        ),
        log_level="INFO",
    )


@pytest.fixture
def app_settings_factory(app_settings: AppSettings) -> Callable[..., AppSettings]:
    def _factory(**overrides: object) -> AppSettings:
        return app_settings.model_copy(update=overrides)

    return _factory
