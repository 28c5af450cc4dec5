"""Top-level mdxref configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .._constants import DEFAULT_EXCLUDE_DIRNAMES, DEFAULT_EXTENSIONS, DEFAULT_EXTERNAL_SCHEMES

CONFIG_FILENAME = ".mdxref.json"


class MdxrefConfig(BaseModel):
    """Configuration for a corpus check run."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions treated as documents",
    )
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES),
        description="Directory names never descended into",
    )
    entry_points: list[str] = Field(
        default_factory=list,
        description="Documents exempt from the orphan check (root-relative)",
    )
    external_schemes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTERNAL_SCHEMES),
        description="URI schemes (without colon) marking a link as external",
    )
    encoding: str = Field("utf-8", description="Text encoding used to read documents")
    workers: int = Field(1, ge=1, description="Number of threads used to read documents")
    log_level: str = Field("WARNING", description="Logging level name")
    log_file: str | None = Field(None, description="Optional log file path")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("extension must not be empty")
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        if not normalized:
            raise ValueError("at least one extension is required")
        return normalized

    @field_validator("external_schemes")
    @classmethod
    def _normalize_schemes(cls, v: list[str]) -> list[str]:
        return [scheme.strip().lower().rstrip(":") for scheme in v if scheme.strip()]

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @classmethod
    def load(cls, path: Path) -> "MdxrefConfig":
        """Load and validate config from a JSON file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if not path.is_file():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error in {path}: {detail}") from e

    @classmethod
    def for_root(cls, root: Path, config_path: Path | None = None) -> "MdxrefConfig":
        """Resolve the config for a run.

        An explicit ``config_path`` wins; otherwise ``<root>/.mdxref.json`` is
        used when it exists, else the defaults.
        """
        if config_path is not None:
            return cls.load(config_path)
        candidate = root / CONFIG_FILENAME
        if candidate.is_file():
            return cls.load(candidate)
        return cls()

    def with_overrides(self, **overrides: Any) -> "MdxrefConfig":
        """Return a validated copy with the non-None overrides applied."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self)(**data)
