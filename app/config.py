from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

DEFAULT_CONFIG_PATH = Path("config/app.yaml")


class BoardStoreSettings(BaseModel):
    api_url: str = "http://localhost:8052"
    api_token: str | None = None
    timeout_seconds: float = 10.0

    @field_validator("api_url", mode="after")
    @classmethod
    def ensure_absolute_url(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if not is_absolute_url(normalized):
            msg = f"board_store.api_url must be an absolute http(s) URL: {value!r}"
            raise ValueError(msg)
        return normalized

    @field_validator("api_token", mode="before")
    @classmethod
    def blank_token_is_none(cls, value: object) -> str | None:
        if value is None:
            return None
        token = str(value).strip()
        return token or None


class OutputSettings(BaseModel):
    scenes_dir: Path = Path("data/scenes")
    excalidraw_base_url: str = "https://excalidraw.com"
    max_url_length: int = 8000


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WBD_", env_nested_delimiter="__")

    board_store: BoardStoreSettings = BoardStoreSettings()
    output: OutputSettings = OutputSettings()
    log_level: str = "INFO"

    _yaml_path: ClassVar[Path | None] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        level = str(value).strip().upper() if value else "INFO"
        if level not in logging.getLevelNamesMapping():
            msg = f"log_level must be a logging level name: {value!r}"
            raise ValueError(msg)
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv("WBD_CONFIG_PATH")
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous


def is_absolute_url(value: str) -> bool:
    raw = str(value or "").strip()
    if not raw:
        return False
    parsed = urlparse(raw)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)
