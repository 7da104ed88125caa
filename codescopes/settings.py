"""User settings loaded from the XDG config directory."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from codescopes.constants import (
    CODESCOPES_FILENAME,
    DEFAULT_SEARCH_PATHS,
    SETTINGS_DIRNAME,
    SETTINGS_FILENAME,
)
from codescopes.errors import InvalidSettingsError
from codescopes.utils import config_home, read_json_safe

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "settings.json"


@dataclass(frozen=True)
class Settings:
    filename: str = CODESCOPES_FILENAME
    search_paths: tuple[str, ...] = field(default=DEFAULT_SEARCH_PATHS)
    fail_on_unscoped: bool = False

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Settings":
        return cls(
            filename=str(payload.get("filename", CODESCOPES_FILENAME)),
            search_paths=tuple(
                str(item) for item in payload.get("search_paths", DEFAULT_SEARCH_PATHS)
            ),
            fail_on_unscoped=bool(payload.get("fail_on_unscoped", False)),
        )


@lru_cache(maxsize=1)
def _settings_validator() -> Draft202012Validator:
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def default_settings_path() -> Path:
    return config_home() / SETTINGS_DIRNAME / SETTINGS_FILENAME


def validate_settings(payload: Any, path: Path) -> None:
    if not isinstance(payload, dict):
        raise InvalidSettingsError(path, "must be a JSON object")
    error = next(iter(_settings_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidSettingsError(path, _schema_error_message(error))


def load_settings(path: Optional[Path] = None) -> Settings:
    settings_path = path or default_settings_path()
    payload, error = read_json_safe(settings_path)
    if error is not None:
        raise InvalidSettingsError(settings_path, f"invalid JSON: {error}")
    if payload is None:
        logger.debug("No settings at %s, using defaults", settings_path)
        return Settings()

    validate_settings(payload, settings_path)
    logger.debug("Loaded settings from %s", settings_path)
    return Settings.from_dict(payload)
