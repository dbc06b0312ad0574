"""
Configuration for an export run.

Configuration is supplied as a JSON file path or directly as a dictionary.
Keys use the camelCase names of the configuration file (``saveImages``,
``frontmatterFields``...); the snake_case attribute names are accepted too.
Missing keys fall back to defaults, some of which can come from the
environment.
"""

from __future__ import annotations

import json
import os
from datetime import timezone as dt_timezone
from datetime import tzinfo
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wp_export.extractors.frontmatter import parse_field_specs
from wp_export.extractors.images import SaveImages
from wp_export.utils.errors import ConfigurationError

DEFAULT_FRONTMATTER_FIELDS = ["title", "date", "categories", "tags", "coverImage", "draft"]


def resolve_timezone(name: str) -> tzinfo:
    """Return the tzinfo for an IANA zone name; ``utc`` is accepted in any case."""
    if name.strip().lower() in ("utc", "z"):
        return dt_timezone.utc
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone {name!r}.") from e


class ExportConfig(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )

    input: str = Field(default_factory=lambda: os.getenv("WP_EXPORT_INPUT", "export.xml"))
    save_images: SaveImages = Field(SaveImages.ALL, alias="saveImages")
    timezone: str = Field(default_factory=lambda: os.getenv("WP_EXPORT_TIMEZONE", "utc"))
    frontmatter_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FRONTMATTER_FIELDS), alias="frontmatterFields"
    )
    report_dir: Optional[str] = Field(None, alias="reportDir")
    request_timeout: float = Field(30.0, alias="requestTimeout", gt=0)

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        resolve_timezone(v)
        return v

    @field_validator("frontmatter_fields", mode="before")
    @classmethod
    def _split_fields(cls, v: Any):
        # allow "title,date,id:post_id" from the command line or environment
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @property
    def tz(self) -> tzinfo:
        return resolve_timezone(self.timezone)


def _by_alias(values: Dict[str, Any]) -> Dict[str, Any]:
    # one key per setting, so a snake_case override replaces a camelCase file value
    aliases = {name: field.alias or name for name, field in ExportConfig.model_fields.items()}
    return {aliases.get(key, key): value for key, value in values.items()}


def load_config(config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> ExportConfig:
    """Build an :class:`ExportConfig` from a JSON file and/or a dictionary.

    Values in ``config`` override those read from ``config_file``.  The
    frontmatter fields are validated here so that an unknown key stops the
    run before any export is read.

    Raises:
        ConfigurationError: If the file is not valid JSON or a value is invalid.
    """
    data: Dict[str, Any] = {}
    if config_file and os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            try:
                loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Could not decode {config_file}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{config_file} must contain a JSON object.")
        data = _by_alias(loaded)
    if config:
        data.update(_by_alias({k: v for k, v in config.items() if v is not None}))

    try:
        cfg = ExportConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    parse_field_specs(cfg.frontmatter_fields)
    return cfg
