"""Configuration for describe.

Settings come from ~/.config/describe/config.yaml (see global_config) and
are overridden by CLI flags. This module holds the provider defaults and
the resolution of the effective run configuration.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from describe.global_config import DEFAULT_MAX_LINES, DEFAULT_TIMEOUT, FileConfig


class ConfigError(Exception):
    """Raised when the effective configuration is invalid."""

    pass


class LLMProvider(Enum):
    """Supported summarization providers."""

    OLLAMA = "ollama"
    OPENROUTER = "openrouter"


# ============================================================
# PROVIDER DEFAULTS
# ============================================================

DEFAULT_ENDPOINTS = {
    LLMProvider.OLLAMA: "http://localhost:11434",
    LLMProvider.OPENROUTER: "https://openrouter.ai/api/v1",
}

DEFAULT_MODELS = {
    LLMProvider.OLLAMA: "llama3.2",
    LLMProvider.OPENROUTER: "anthropic/claude-4.5-sonnet",
}

# Environment variable names for API keys
API_KEY_ENV_VARS = {
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
}


@dataclass
class RunConfig:
    """Effective configuration for one invocation."""

    provider: LLMProvider
    model: str
    api_endpoint: str
    api_key: str = ""
    debug: bool = False
    max_lines: int = DEFAULT_MAX_LINES
    timeout: float = DEFAULT_TIMEOUT


def parse_provider(name: str) -> LLMProvider:
    """Parse a provider name.

    Raises:
        ConfigError: If the name is not a supported provider.
    """
    try:
        return LLMProvider(name.lower())
    except ValueError:
        valid = " or ".join(f"'{p.value}'" for p in LLMProvider)
        raise ConfigError(f"invalid provider: {name} (must be {valid})")


def resolve_config(
    file_config: FileConfig,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    endpoint: Optional[str] = None,
    debug: Optional[bool] = None,
    max_lines: Optional[int] = None,
    timeout: Optional[float] = None,
    require_api_key: bool = True,
) -> RunConfig:
    """Merge the config file with CLI overrides into a RunConfig.

    CLI values win over the file. Choosing a provider on the command line
    also switches the model and endpoint to that provider's defaults unless
    they are given explicitly too.

    Args:
        file_config: Values loaded from the config file (defaults applied).
        provider: --provider override.
        model: --model override.
        endpoint: --endpoint override.
        debug: --debug override.
        max_lines: --max-lines override.
        timeout: --timeout override.
        require_api_key: Fail when the provider needs a key and none is set.

    Returns:
        The validated run configuration.

    Raises:
        ConfigError: If the provider is invalid or a required API key is missing.
    """
    active_provider = parse_provider(provider or file_config.provider)
    active_model = file_config.model
    active_endpoint = file_config.api_endpoint

    if provider:
        if not model:
            active_model = DEFAULT_MODELS[active_provider]
        if not endpoint:
            active_endpoint = DEFAULT_ENDPOINTS[active_provider]

    config = RunConfig(
        provider=active_provider,
        model=model or active_model or DEFAULT_MODELS[active_provider],
        api_endpoint=endpoint or active_endpoint or DEFAULT_ENDPOINTS[active_provider],
        api_key=file_config.api_key,
        debug=file_config.debug if debug is None else debug,
        max_lines=file_config.max_lines if max_lines is None else max_lines,
        timeout=file_config.timeout if timeout is None else timeout,
    )

    env_var = API_KEY_ENV_VARS.get(config.provider)
    if env_var and not config.api_key:
        config.api_key = os.getenv(env_var, "")

    if require_api_key and env_var and not config.api_key:
        raise ConfigError(
            f"{env_var} environment variable or api_key in config file "
            f"required for {config.provider.value} provider"
        )

    return config
