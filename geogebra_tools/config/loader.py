import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from geogebra_tools.config.schema import AppConfig, EngineConfig, LoggingConfig

_SECTION_CLASSES = {
    "engine": EngineConfig,
    "logging": LoggingConfig,
}

_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "GEOGEBRA_ENGINE_URL": ("engine", "base_url"),
    "GEOGEBRA_ENGINE_BACKEND": ("engine", "backend"),
    "GEOGEBRA_LOG_LEVEL": ("logging", "level"),
}


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Override YAML values with environment variables where mapped."""
    for env_var, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value is not None:
            data.setdefault(section, {})[key] = value


def load_config(
    config_path: Path = Path("config.yaml"),
    env_path: Path = Path(".env"),
) -> AppConfig:
    """Load YAML config, merge .env overrides, return frozen AppConfig."""
    if env_path.exists():
        load_dotenv(env_path, override=False)

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    _apply_env_overrides(data)

    sections: dict[str, Any] = {}
    for name, cls in _SECTION_CLASSES.items():
        section_data = data.get(name, {})
        if section_data:
            sections[name] = cls(**section_data)
        else:
            sections[name] = cls()

    return AppConfig(**sections)
