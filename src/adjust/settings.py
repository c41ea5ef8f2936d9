from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from ruamel.yaml import YAML

DEFAULT_SETTINGS_PATH = "~/.config/adjust/config.yaml"


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # keep field names in lowerCamelCase (no underscores)
    adjustmentsPath: str = "~/.adjustments"
    quitKey: str = "q"
    stderrSuffix: str = " 2>/dev/null"

    # misc
    logLevel: str = "WARNING"
    logFile: str | None = None

    @field_validator("adjustmentsPath")
    @classmethod
    def expandPath(cls, v: str) -> str:
        return os.path.expanduser(os.path.expandvars(v))

    @field_validator("quitKey")
    @classmethod
    def singleChar(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("quitKey must be a single character")
        return v

    @field_validator("logLevel")
    @classmethod
    def upperLevel(cls, v: str) -> str:
        return str(v).upper()


def yamlLoader() -> YAML:
    return YAML(typ="rt")


def settingsPath() -> str:
    return os.environ.get("ADJUST_CONFIG") or os.path.expanduser(DEFAULT_SETTINGS_PATH)


def loadSettings(path: str | None = None) -> Settings:
    path = path or settingsPath()
    if not os.path.exists(path):
        return Settings()

    with open(path, encoding="utf-8") as f:
        doc = yamlLoader().load(f) or {}
    if not isinstance(doc, Mapping):
        raise RuntimeError(f"settings validation failed: {path} is not a mapping")

    try:
        return Settings.model_validate(dict(doc))
    except ValidationError as e:
        raise RuntimeError(f"settings validation failed: {e}") from e
