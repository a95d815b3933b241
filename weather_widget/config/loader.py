from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from weather_widget.config.models import WidgetSettings
from weather_widget.exceptions import ConfigError


def load_config(path: str | Path) -> WidgetSettings:
    """
    Load and validate a YAML widget config.

    Raises:
        FileNotFoundError: if the file does not exist
        ConfigError: for YAML syntax errors or validation errors
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at the top of {p}")

    # The widget section is optional so the file can be shared with other tools.
    section = raw.get("weather_widget", raw)

    try:
        return WidgetSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values in {p}:\n{e}") from e
