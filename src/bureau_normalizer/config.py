"""Output and logging settings, loaded from YAML and environment."""

import os
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "BUREAU_NORMALIZER_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NormalizerSettings(BaseModel):
    """How normalized payloads are serialized and how loudly we log."""

    indent: Optional[int] = Field(default=None, ge=0, description="JSON indent; None = compact")
    drop_empty: bool = Field(default=True, description="Omit None scalars from prompt JSON")
    log_level: str = "WARNING"

    @field_validator("indent", mode="before")
    @classmethod
    def _none_indent(cls, v):
        if isinstance(v, str) and v.strip().lower() == "none":
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_yaml(cls, path: str | Path) -> "NormalizerSettings":
        """Load settings from YAML. Supports nested (output/logging) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        output = data.get("output") or {}
        logging_cfg = data.get("logging") or {}

        def _get(key: str, nested: dict, top: dict, default=None):
            return nested.get(key, top.get(key, default))

        flat: dict = {}
        for key in ("indent", "drop_empty"):
            value = _get(key, output, data)
            if value is not None:
                flat[key] = value
        level = _get("level", logging_cfg, data) or data.get("log_level")
        if level:
            flat["log_level"] = level
        return cls.model_validate(flat)

    def with_env(self, environ: Optional[dict[str, str]] = None) -> "NormalizerSettings":
        """Return a copy with BUREAU_NORMALIZER_* environment overrides applied."""
        env = os.environ if environ is None else environ
        updates: dict = {}
        indent = env.get(f"{ENV_PREFIX}INDENT")
        if indent:
            updates["indent"] = indent
        drop = (env.get(f"{ENV_PREFIX}DROP_EMPTY") or "").strip().lower()
        if drop in _TRUE:
            updates["drop_empty"] = True
        elif drop in _FALSE:
            updates["drop_empty"] = False
        level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            updates["log_level"] = level
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "NormalizerSettings":
        """Defaults overridden by environment variables."""
        return cls().with_env(environ)


def load_settings(path: Optional[str | Path] = None) -> NormalizerSettings:
    """YAML file (when given) first, then environment overrides."""
    base = NormalizerSettings.from_yaml(path) if path else NormalizerSettings()
    return base.with_env()
