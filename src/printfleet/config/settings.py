from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from printfleet.models import DuplicatePolicy, FileFormat
from printfleet.utils.toml import toml_bool, toml_string

from .paths import default_config_path, default_data_dir, expand_path

CONFIG_ENV_VAR = "PRINTFLEET_CONFIG"


class DatabaseConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_data_dir()))


class ImportConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    on_duplicate: DuplicatePolicy = DuplicatePolicy.SKIP


class ExportConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    format: FileFormat = FileFormat.JSON
    include_timestamps: bool = False
    pretty: bool = True


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    imports: ImportConfig = Field(default_factory=ImportConfig)
    exports: ExportConfig = Field(default_factory=ExportConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def data_dir_from_settings(settings: Settings) -> Path:
    return expand_path(settings.database.path)


def render_settings_toml(settings: Settings) -> str:
    lines = [
        "# printfleet configuration",
        "",
        "[database]",
        f"path = {toml_string(settings.database.path)}",
        "",
        "[imports]",
        "# skip | overwrite | allow",
        f"on_duplicate = {toml_string(settings.imports.on_duplicate.value)}",
        "",
        "[exports]",
        f"format = {toml_string(settings.exports.format.value)}",
        f"include_timestamps = {toml_bool(settings.exports.include_timestamps)}",
        f"pretty = {toml_bool(settings.exports.pretty)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings), encoding="utf-8")
