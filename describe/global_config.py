"""Global configuration management for describe.

Handles user-level configuration stored in the user config directory
(``$XDG_CONFIG_HOME/describe`` or ``~/.config/describe``):
- config.yaml: Provider, model, endpoint and limit settings
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ValidationError, field_validator


DEFAULT_MAX_LINES = 10000
DEFAULT_TIMEOUT = 300.0


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


class FileConfig(BaseModel):
    """Settings read from config.yaml.

    Empty ``model`` and ``api_endpoint`` mean "use the provider default";
    they are filled in when the run configuration is resolved.
    """

    provider: str = "ollama"
    api_key: str = ""
    api_endpoint: str = ""
    model: str = ""
    debug: bool = False
    max_lines: int = DEFAULT_MAX_LINES
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("provider", "api_key", "api_endpoint", "model", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat keys present with no value as unset."""
        return "" if v is None else v

    @field_validator("provider")
    @classmethod
    def provider_default(cls, v: str) -> str:
        return v.strip() or "ollama"

    @field_validator("max_lines", mode="before")
    @classmethod
    def max_lines_default(cls, v: Any) -> Any:
        """A zero or missing limit falls back to the default; negatives disable it."""
        if v is None or v == 0:
            return DEFAULT_MAX_LINES
        return v


def get_global_config_dir() -> Path:
    """Get the global describe configuration directory.

    Returns:
        Path to $XDG_CONFIG_HOME/describe, or ~/.config/describe.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "describe"
    return Path.home() / ".config" / "describe"


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to <config dir>/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load the raw configuration mapping from config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a YAML mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Failed to load config from {config_file}: expected a mapping")
    return config


def load_file_config() -> FileConfig:
    """Load and validate config.yaml, applying defaults for missing keys.

    Returns:
        The validated FileConfig (all defaults if the file doesn't exist).

    Raises:
        GlobalConfigError: If the file is unreadable or has invalid values.
    """
    raw = load_global_config()
    try:
        return FileConfig(**raw)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid config in {get_config_file_path()}: {e}")


def save_global_config(config: Dict[str, Any]) -> None:
    """Save configuration to config.yaml, creating the directory if needed.

    Args:
        config: Configuration dictionary to save.
    """
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def is_configured() -> bool:
    """Check if a config file exists."""
    return get_config_file_path().exists()
