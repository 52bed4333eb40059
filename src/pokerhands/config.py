"""Service configuration loader.

Values come from an optional YAML file, then environment variables
override them. The CLI loads a .env file into the environment first.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from pokerhands.core.judge import DEFAULT_REQUEST_ID_PREFIX
from pokerhands.core.messages import check_language

ENV_PREFIX = "POKERHANDS_"


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class StorageConfig:
    uri: str | None = None  # no URI -> hands are not persisted
    db_name: str = "pokerhands"
    collection: str = "poker_results"


@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    request_id_prefix: str = DEFAULT_REQUEST_ID_PREFIX
    language: str = "en"  # "en" or "ja"
    log_level: str = "INFO"


def check_log_level(level: str) -> str:
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        raise ValueError(f"Unknown log level {level!r}")
    return level


def _apply_env(config: AppConfig, env: Mapping[str, str]) -> None:
    def get(name: str) -> str | None:
        value = env.get(ENV_PREFIX + name)
        return value if value else None

    if (host := get("HOST")) is not None:
        config.server.host = host
    if (port := get("PORT")) is not None:
        config.server.port = int(port)
    if (uri := get("MONGO_URI")) is not None:
        config.storage.uri = uri
    if (db_name := get("DB_NAME")) is not None:
        config.storage.db_name = db_name
    if (collection := get("COLLECTION")) is not None:
        config.storage.collection = collection
    if (prefix := get("REQUEST_ID_PREFIX")) is not None:
        config.request_id_prefix = prefix
    if (language := get("LANGUAGE")) is not None:
        config.language = language
    if (log_level := get("LOG_LEVEL")) is not None:
        config.log_level = log_level


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load config from a YAML file (optional) and environment overrides."""
    raw: dict = {}
    if path is not None:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    server = raw.get("server") or {}
    storage = raw.get("storage") or {}

    config = AppConfig(
        server=ServerConfig(
            host=server.get("host", "127.0.0.1"),
            port=int(server.get("port", 8080)),
        ),
        storage=StorageConfig(
            uri=storage.get("uri"),
            db_name=storage.get("db_name", "pokerhands"),
            collection=storage.get("collection", "poker_results"),
        ),
        request_id_prefix=str(raw.get("request_id_prefix", DEFAULT_REQUEST_ID_PREFIX)),
        language=raw.get("language", "en"),
        log_level=raw.get("log_level", "INFO"),
    )

    _apply_env(config, os.environ if env is None else env)
    check_language(config.language)
    check_log_level(config.log_level)
    return config
