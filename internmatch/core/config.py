"""Configuration models and YAML loader for the internship matcher."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from internmatch.core.schemas import ANY_LOCATION

DEFAULT_LOCATION_OPTIONS = [ANY_LOCATION, "Remote", "Bengaluru", "New Delhi", "Mumbai"]
DEFAULT_EXPORT_PATH = "intern_recommendations.csv"


class CatalogConfig(BaseModel):
    """Where the catalog comes from. No path means the built-in sample catalog."""

    path: str | None = None


class ProfileConfig(BaseModel):
    """Options offered to whoever collects a profile (the CLI, a form)."""

    location_options: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LOCATION_OPTIONS),
    )

    @field_validator("location_options")
    @classmethod
    def includes_any(cls, v: list[str]) -> list[str]:
        options = [o.strip() for o in v if o.strip()]
        if not options:
            msg = "location_options must not be empty"
            raise ValueError(msg)
        if ANY_LOCATION not in options:
            msg = f"location_options must include '{ANY_LOCATION}'"
            raise ValueError(msg)
        return options


class ExportConfig(BaseModel):
    """CSV export settings."""

    path: str = DEFAULT_EXPORT_PATH

    @field_validator("path")
    @classmethod
    def path_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "export path must not be empty"
            raise ValueError(msg)
        return v.strip()


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
