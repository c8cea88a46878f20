"""Configuration model and loaders for the command line tools."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

SourceFormat = Literal["auto", "text", "bytes", "json", "jsonl", "csv"]


class GradientConfig(BaseModel):
    """Options shared by the ``windows`` and ``at`` commands."""

    model_config = ConfigDict(extra="forbid")

    max_width: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=0)
    source_format: SourceFormat = "auto"
    value_column: Optional[str] = None
    separator: str = ""

    @field_validator("max_width", "limit", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("expected an integer, not a boolean")
        return value

    def merged(self, **overrides: Any) -> GradientConfig:
        """Return a copy with every non-None override applied."""

        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **updates})


@dataclass
class ValidationResult:
    errors: list[str]
    normalized: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, Any]:
        return {"ok": self.ok, "errors": self.errors, "normalized": self.normalized}


def _format_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "config"
    return f"{location}: {error.get('msg', 'invalid value')}"


def validate_config(config: Mapping[str, Any]) -> ValidationResult:
    """Validate a configuration mapping without raising.

    On success ``normalized`` holds the full config with defaults applied; on
    failure it echoes the input so callers can show what was rejected.
    """

    try:
        model = GradientConfig.model_validate(dict(config))
    except ValidationError as exc:
        return ValidationResult(errors=[_format_error(err) for err in exc.errors()], normalized=dict(config))
    return ValidationResult(errors=[], normalized=model.model_dump())


def read_config_file(path: str | Path) -> Dict[str, Any]:
    """Read a YAML or JSON mapping from ``path``."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        loaded = json.loads(text)
    else:
        loaded = yaml.safe_load(text)

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration must be a mapping (got {type(loaded).__name__}): {path}")
    return loaded


def load_config(path: str | Path | None = None) -> GradientConfig:
    """Load and validate a config file; ``None`` gives the defaults."""

    if path is None:
        return GradientConfig()
    return GradientConfig.model_validate(read_config_file(path))


def validate_config_file(path: str | Path) -> ValidationResult:
    """Load and validate a configuration file."""
    return validate_config(read_config_file(path))
