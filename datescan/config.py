"""Runtime settings for the datescan CLI and HTTP service.

The parsing core takes no settings; these only shape the outer surfaces.

Sources, lowest precedence first
--------------------------------
1. Defaults on :class:`Settings`.
2. A YAML file: explicit ``path`` argument, else ``DATESCAN_CONFIG``.
3. Environment variables:

DATESCAN_LOG_LEVEL (default INFO)
DATESCAN_MAX_INPUT_LENGTH (int, default 512)
    Longest string the HTTP service will try to parse.
DATESCAN_MAX_BATCH_SIZE (int, default 100)
DATESCAN_CORS_ORIGINS (comma-separated, default "*")

DATESCAN_DOTENV (path to .env, default ".env")
    Loaded with python-dotenv on import so the CLI and the API see the same
    environment.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

_ = load_dotenv(dotenv_path=os.getenv("DATESCAN_DOTENV", ".env"))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = "INFO"
    max_input_length: int = 512
    max_batch_size: int = 100
    cors_origins: list[str] = ["*"]


def load_config_file(path: Union[str, Path]) -> dict[str, Any]:
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    level = os.getenv("DATESCAN_LOG_LEVEL")
    if level:
        overrides["log_level"] = level
    for key, env_name in (
        ("max_input_length", "DATESCAN_MAX_INPUT_LENGTH"),
        ("max_batch_size", "DATESCAN_MAX_BATCH_SIZE"),
    ):
        v = os.getenv(env_name)
        if v:
            overrides[key] = int(v)
    origins = os.getenv("DATESCAN_CORS_ORIGINS")
    if origins:
        overrides["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
    return overrides


def load_settings(path: Union[str, Path, None] = None) -> Settings:
    data: dict[str, Any] = {}
    path = path or os.getenv("DATESCAN_CONFIG")
    if path:
        data.update(load_config_file(path))
    data.update(_env_overrides())
    return Settings(**data)


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
